from fastapi import FastAPI, WebSocket, HTTPException, Body
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from typing import List
import uvicorn
import asyncio
import logging
import uuid

import config
from .component_library import library
from .exporter import render_workflow_svg
from .properties import property_fields, update_layout, update_property
from .schemas import (
    AddComponent, CanvasPointerDown, ClientPoint, ComponentCategory, CreateApp,
    PortEvent, PropertyChange, PropertyField, SaveApp, SelectComponent, SelectNode,
    TabChange, WheelEvent, ZoomChange,
)
from .session import BuilderSession
from .websockets import manager
from .workspace_manager import WorkspaceManager

# Setup Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="App Builder Editor")

workspace_manager = WorkspaceManager(config.WORKSPACE_ROOT)

loop_instance = None

@app.on_event("startup")
async def set_loop():
    global loop_instance
    loop_instance = asyncio.get_running_loop()

@app.on_event("shutdown")
async def clear_loop():
    global loop_instance
    loop_instance = None

def event_callback(event, payload):
    # Handlers run in the threadpool; hand the broadcast to the server loop
    if loop_instance and not loop_instance.is_closed():
        asyncio.run_coroutine_threadsafe(manager.send_event(event, payload), loop_instance)
    else:
        logger.debug(f"No event loop yet, dropping event {event}")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Open editing sessions, keyed by session id
sessions = {}

def get_session(session_id: str) -> BuilderSession:
    session = sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session

def get_component(session: BuilderSession, component_id: str):
    component = session.get_component(component_id)
    if not component:
        raise HTTPException(status_code=404, detail="Component not found")
    return component

def get_workflow(session: BuilderSession):
    if not session.workflow:
        raise HTTPException(status_code=409, detail="Workflow view is not open")
    return session.workflow

def open_session(session: BuilderSession):
    session_id = uuid.uuid4().hex
    sessions[session_id] = session
    logger.info(f"Opened session {session_id} for '{session.app_name}'")
    return {"id": session_id, **session.state()}

@app.get("/")
def read_root():
    return {"message": "App Builder Editor API"}

@app.get("/api/components", response_model=List[ComponentCategory])
def get_components(q: str = ""):
    return library.get_categories(q)

# --- SESSION ENDPOINTS ---

@app.post("/api/apps")
def create_app(body: CreateApp):
    return open_session(BuilderSession(app_name=body.name, on_event=event_callback))

@app.get("/api/apps/{session_id}")
def read_app(session_id: str):
    return {"id": session_id, **get_session(session_id).state()}

@app.delete("/api/apps/{session_id}")
def close_app(session_id: str):
    get_session(session_id)
    sessions.pop(session_id)
    return {"status": "closed", "id": session_id}

@app.post("/api/apps/{session_id}/components")
def add_component(session_id: str, body: AddComponent):
    session = get_session(session_id)
    try:
        component = session.add_component(body.type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return component.model_dump()

@app.delete("/api/apps/{session_id}/components/{component_id}")
def delete_component(session_id: str, component_id: str):
    session = get_session(session_id)
    get_component(session, component_id)
    session.delete_component(component_id)
    return {"status": "deleted", "id": component_id}

@app.get("/api/apps/{session_id}/components/{component_id}/fields", response_model=List[PropertyField])
def get_component_fields(session_id: str, component_id: str):
    session = get_session(session_id)
    return property_fields(get_component(session, component_id))

@app.post("/api/apps/{session_id}/components/{component_id}/props")
def change_property(session_id: str, component_id: str, body: PropertyChange):
    session = get_session(session_id)
    updated = update_property(get_component(session, component_id), body.property, body.value)
    session.update_component(updated)
    return updated.model_dump()

@app.post("/api/apps/{session_id}/components/{component_id}/layout")
def change_layout(session_id: str, component_id: str, body: PropertyChange):
    session = get_session(session_id)
    try:
        updated = update_layout(get_component(session, component_id), body.property, body.value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    session.update_component(updated)
    return updated.model_dump()

@app.post("/api/apps/{session_id}/select")
def select_component(session_id: str, body: SelectComponent):
    session = get_session(session_id)
    component = get_component(session, body.component_id) if body.component_id else None
    session.select_component(component)
    return session.state()

@app.post("/api/apps/{session_id}/tab")
def change_tab(session_id: str, body: TabChange):
    session = get_session(session_id)
    try:
        session.set_tab(body.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"tab": session.current_tab}

# --- CANVAS ENDPOINTS ---

@app.get("/api/apps/{session_id}/canvas")
def read_canvas(session_id: str):
    return get_session(session_id).canvas.view()

@app.post("/api/apps/{session_id}/canvas/origin")
def set_canvas_origin(session_id: str, body: ClientPoint):
    canvas = get_session(session_id).canvas
    canvas.origin = canvas.origin._replace(x=body.client_x, y=body.client_y)
    return canvas.view()

@app.post("/api/apps/{session_id}/canvas/pointer-down")
def canvas_pointer_down(session_id: str, body: CanvasPointerDown):
    canvas = get_session(session_id).canvas
    if body.handle:
        handled = canvas.pointer_down_handle(body.component_id, body.handle, body.client_x, body.client_y)
    else:
        handled = canvas.pointer_down(body.component_id, body.client_x, body.client_y)
    return {"handled": handled, **canvas.view()}

@app.post("/api/apps/{session_id}/canvas/pointer-move")
def canvas_pointer_move(session_id: str, body: ClientPoint):
    canvas = get_session(session_id).canvas
    updated = canvas.pointer_move(body.client_x, body.client_y)
    return {"component": updated.model_dump() if updated else None}

@app.post("/api/apps/{session_id}/canvas/pointer-up")
def canvas_pointer_up(session_id: str):
    canvas = get_session(session_id).canvas
    canvas.pointer_up()
    return canvas.view()

@app.post("/api/apps/{session_id}/canvas/click")
def canvas_click(session_id: str, body: ClientPoint):
    session = get_session(session_id)
    session.canvas.click(body.client_x, body.client_y)
    return session.state()

@app.post("/api/apps/{session_id}/canvas/wheel")
def canvas_wheel(session_id: str, body: WheelEvent):
    canvas = get_session(session_id).canvas
    consumed = canvas.wheel(body.delta_y, body.ctrl_key)
    return {"consumed": consumed, "scale": canvas.scale, "zoom": canvas.zoom_label}

@app.post("/api/apps/{session_id}/canvas/zoom")
def canvas_zoom(session_id: str, body: ZoomChange):
    canvas = get_session(session_id).canvas
    if body.direction == "in":
        canvas.zoom_in()
    elif body.direction == "out":
        canvas.zoom_out()
    else:
        raise HTTPException(status_code=400, detail=f"Unknown zoom direction: {body.direction}")
    return {"scale": canvas.scale, "zoom": canvas.zoom_label}

# --- WORKFLOW ENDPOINTS ---

@app.get("/api/apps/{session_id}/workflow")
def read_workflow(session_id: str):
    return get_workflow(get_session(session_id)).render()

@app.get("/api/apps/{session_id}/workflow/svg")
def export_workflow(session_id: str):
    workflow = get_workflow(get_session(session_id))
    return Response(render_workflow_svg(workflow.render()), media_type="image/svg+xml")

@app.post("/api/apps/{session_id}/workflow/origin")
def set_workflow_origin(session_id: str, body: ClientPoint):
    workflow = get_workflow(get_session(session_id))
    workflow.origin = workflow.origin._replace(x=body.client_x, y=body.client_y)
    return {"status": "ok"}

@app.post("/api/apps/{session_id}/workflow/port-down")
def workflow_port_down(session_id: str, body: PortEvent):
    workflow = get_workflow(get_session(session_id))
    armed = workflow.port_down(body.node_id, body.port_id, body.is_output)
    return {"armed": armed, "pending": workflow.pending_line()}

@app.post("/api/apps/{session_id}/workflow/pointer-move")
def workflow_pointer_move(session_id: str, body: ClientPoint):
    workflow = get_workflow(get_session(session_id))
    return {"pending": workflow.pointer_move(body.client_x, body.client_y)}

@app.post("/api/apps/{session_id}/workflow/port-up")
def workflow_port_up(session_id: str, body: PortEvent):
    workflow = get_workflow(get_session(session_id))
    connection = workflow.port_up(body.node_id, body.port_id, body.is_output)
    return {"connection": connection.model_dump(by_alias=True) if connection else None}

@app.post("/api/apps/{session_id}/workflow/pointer-up")
def workflow_pointer_up(session_id: str):
    workflow = get_workflow(get_session(session_id))
    workflow.pointer_up()
    return {"armed": workflow.is_creating_connection}

@app.post("/api/apps/{session_id}/workflow/select")
def workflow_select(session_id: str, body: SelectNode):
    workflow = get_workflow(get_session(session_id))
    return {"panel": workflow.select_node(body.node_id)}

@app.post("/api/apps/{session_id}/workflow/panel")
def workflow_edit_panel(session_id: str, body: PropertyChange):
    workflow = get_workflow(get_session(session_id))
    try:
        panel = workflow.edit_panel(body.property, body.value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if panel is None:
        raise HTTPException(status_code=409, detail="No node selected")
    return {"panel": panel}

@app.delete("/api/apps/{session_id}/workflow/connections/{connection_id}")
def delete_connection(session_id: str, connection_id: str):
    workflow = get_workflow(get_session(session_id))
    if not workflow.delete_connection(connection_id):
        raise HTTPException(status_code=404, detail="Connection not found")
    return {"status": "deleted", "id": connection_id}

# --- WORKSPACE ENDPOINTS ---

@app.get("/api/workspaces")
def list_workspaces():
    return workspace_manager.list_workspaces()

@app.post("/api/workspaces")
def create_workspace(name: str = Body(..., embed=True)):
    try:
        workspace_manager.create_workspace(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "created", "name": name}

@app.get("/api/workspaces/active")
def get_active_workspace():
    return {"name": workspace_manager.get_current_workspace()}

@app.post("/api/workspaces/active")
def set_active_workspace(name: str = Body(..., embed=True)):
    try:
        workspace_manager.set_current_workspace(name)
        return {"status": "switched", "name": name}
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

@app.delete("/api/workspaces/{name}")
def delete_workspace(name: str):
    try:
        workspace_manager.delete_workspace(name)
        return {"status": "deleted", "name": name}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

# --- SAVED APP ENDPOINTS ---

@app.post("/api/apps/{session_id}/save")
def save_app(session_id: str, body: SaveApp):
    session = get_session(session_id)
    name = body.name or session.app_name
    try:
        workspace_manager.save_app(name, session.to_document())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "saved", "name": name}

@app.get("/api/saved-apps")
def list_saved_apps():
    return workspace_manager.list_apps()

@app.post("/api/saved-apps/{name}/open")
def open_saved_app(name: str):
    try:
        document = workspace_manager.load_app(name)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="App not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return open_session(BuilderSession.from_document(document, on_event=event_callback))

@app.delete("/api/saved-apps/{name}")
def delete_saved_app(name: str):
    try:
        workspace_manager.delete_app(name)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="App not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "deleted", "name": name}

@app.websocket("/api/ws")
async def websocket_endpoint(websocket: WebSocket):
    await manager.connect(websocket)
    try:
        while True:
            # Keep alive / listen
            await websocket.receive_text()
    except Exception:
        manager.disconnect(websocket)


# Log Buffer
log_buffer = []

class ListHandler(logging.Handler):
    def emit(self, record):
        log_buffer.append(self.format(record))
        if len(log_buffer) > 100:
            log_buffer.pop(0)

handler = ListHandler()
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
handler.setFormatter(formatter)
logging.getLogger().addHandler(handler)

@app.get("/api/logs")
def get_logs():
    return log_buffer

if __name__ == "__main__":
    uvicorn.run("appbuilder.main:app", host="0.0.0.0", port=8000, reload=True)

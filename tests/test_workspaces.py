import pytest
from appbuilder.schemas import AppDocument, PlacedComponent
from appbuilder.workspace_manager import WorkspaceManager

@pytest.fixture
def manager(tmp_path):
    return WorkspaceManager(tmp_path / "workspaces")

def test_default_workspace(manager):
    assert manager.list_workspaces() == ["default"]
    assert manager.get_current_workspace() == "default"

def test_create_and_switch_workspace(manager):
    manager.create_workspace("test_ws")
    assert "test_ws" in manager.list_workspaces()

    manager.set_current_workspace("test_ws")
    assert manager.get_current_workspace() == "test_ws"

def test_switch_to_missing_workspace(manager):
    with pytest.raises(ValueError):
        manager.set_current_workspace("nope")

def test_delete_workspace(manager):
    manager.create_workspace("test_del")

    with pytest.raises(ValueError):
        manager.delete_workspace("default")

    manager.set_current_workspace("test_del")
    with pytest.raises(ValueError):
        manager.delete_workspace("test_del")

    manager.set_current_workspace("default")
    manager.delete_workspace("test_del")
    assert "test_del" not in manager.list_workspaces()

def test_app_round_trip(manager):
    document = AppDocument(name="Portal", components=[
        PlacedComponent(id="c1", type="button", x=150, y=130, width=120, height=40, props={"text": "Go"}),
    ])
    manager.save_app("portal", document)

    assert manager.list_apps() == ["portal"]
    loaded = manager.load_app("portal")
    assert loaded == document

def test_app_isolation(manager):
    manager.save_app("app_default", AppDocument())

    manager.create_workspace("test_ws")
    manager.set_current_workspace("test_ws")
    assert manager.list_apps() == []
    manager.save_app("app_test", AppDocument())

    manager.set_current_workspace("default")
    assert manager.list_apps() == ["app_default"]

def test_missing_app(manager):
    with pytest.raises(FileNotFoundError):
        manager.load_app("ghost")
    with pytest.raises(FileNotFoundError):
        manager.delete_app("ghost")

def test_invalid_app_name(manager):
    with pytest.raises(ValueError):
        manager.save_app("../escape", AppDocument())

def test_delete_app(manager):
    manager.save_app("temp", AppDocument())
    manager.delete_app("temp")
    assert manager.list_apps() == []

@pytest.mark.parametrize("name", ["", "..", "../escaped", ".hidden", "a/b"])
def test_workspace_name_must_stay_under_root(tmp_path, manager, name):
    sentinel = tmp_path / "keep.txt"
    sentinel.write_text("keep")

    with pytest.raises(ValueError):
        manager.create_workspace(name)
    with pytest.raises(ValueError):
        manager.set_current_workspace(name)
    with pytest.raises(ValueError):
        manager.delete_workspace(name)

    assert sentinel.read_text() == "keep"
    assert not (tmp_path / "escaped").exists()
    assert manager.get_current_workspace() == "default"

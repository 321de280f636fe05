import unittest
from appbuilder.canvas import CanvasEditor
from appbuilder.geometry import Point
from appbuilder.schemas import PlacedComponent

def make_button(component_id="c1", x=100, y=100):
    return PlacedComponent(id=component_id, type="button", x=x, y=y, width=120, height=40)

class TestCanvasDrag(unittest.TestCase):
    def setUp(self):
        self.canvas = CanvasEditor(components=[make_button()])

    def test_drag_at_zoom_1(self):
        """Dragging by (+50, +30) at zoom 1 moves the component by the same amount."""
        self.canvas.pointer_down("c1", 110, 110)
        updated = self.canvas.pointer_move(160, 140)

        self.assertEqual((updated.x, updated.y), (150, 130))
        self.assertEqual(self.canvas.components[0].x, 150)
        self.assertEqual(self.canvas.selected_component.id, "c1")

    def test_drag_at_zoom_2(self):
        """At zoom 2 the same client displacement is halved in canvas units."""
        self.canvas.set_scale(2.0)
        # Component's client rect starts at (200, 200)
        self.canvas.pointer_down("c1", 210, 205)
        updated = self.canvas.pointer_move(260, 235)

        self.assertEqual((updated.x, updated.y), (125, 115))

    def test_drag_respects_canvas_origin(self):
        self.canvas.origin = Point(40, 60)
        self.canvas.pointer_down("c1", 150, 170)
        updated = self.canvas.pointer_move(200, 200)

        self.assertEqual((updated.x, updated.y), (150, 130))

    def test_drag_clamps_to_zero(self):
        self.canvas.pointer_down("c1", 110, 110)
        updated = self.canvas.pointer_move(-5000, -3000)

        self.assertEqual(updated.x, 0)
        self.assertEqual(updated.y, 0)

    def test_drag_keeps_other_fields(self):
        self.canvas.pointer_down("c1", 110, 110)
        updated = self.canvas.pointer_move(120, 130)

        self.assertEqual(updated.width, 120)
        self.assertEqual(updated.height, 40)
        self.assertEqual(updated.type, "button")

    def test_move_without_drag_is_noop(self):
        self.assertIsNone(self.canvas.pointer_move(300, 300))
        self.assertEqual(self.canvas.components[0].x, 100)

    def test_pointer_up_ends_drag(self):
        self.canvas.pointer_down("c1", 110, 110)
        self.canvas.pointer_up()

        self.assertFalse(self.canvas.is_dragging)
        self.assertIsNone(self.canvas.pointer_move(300, 300))

    def test_pointer_down_on_unknown_component(self):
        self.assertFalse(self.canvas.pointer_down("missing", 0, 0))
        self.assertFalse(self.canvas.is_dragging)

    def test_callbacks_receive_merged_copy(self):
        selected, updates = [], []
        canvas = CanvasEditor(
            components=[make_button()],
            on_select_component=selected.append,
            on_update_component=updates.append,
        )
        canvas.pointer_down("c1", 110, 110)
        self.assertEqual(selected[0].id, "c1")

        # Controlled: the owner pushes the selection back down
        canvas.selected_component = selected[0]
        canvas.pointer_move(130, 110)

        self.assertEqual(len(updates), 1)
        self.assertEqual(updates[0].x, 120)
        # The canvas does not touch its own props
        self.assertEqual(canvas.components[0].x, 100)

class TestCanvasSelection(unittest.TestCase):
    def setUp(self):
        self.canvas = CanvasEditor(components=[
            make_button("bottom", 100, 100),
            make_button("top", 150, 110),
        ])

    def test_background_click_deselects(self):
        self.canvas.click(150, 110)
        self.assertIsNotNone(self.canvas.selected_component)

        hit = self.canvas.click(10, 10)

        self.assertIsNone(hit)
        self.assertIsNone(self.canvas.selected_component)

    def test_click_picks_topmost(self):
        hit = self.canvas.click(160, 120)
        self.assertEqual(hit.id, "top")

        hit = self.canvas.click(105, 105)
        self.assertEqual(hit.id, "bottom")

    def test_click_uses_zoom(self):
        self.canvas.set_scale(0.5)
        # (55, 55) client -> (110, 110) canvas
        self.assertEqual(self.canvas.click(55, 55).id, "bottom")
        self.assertIsNone(self.canvas.click(200, 200))

    def test_handles_only_on_selected(self):
        self.canvas.click(105, 105)
        view = self.canvas.view()

        by_id = {item["component"]["id"]: item for item in view["components"]}
        self.assertEqual(by_id["bottom"]["handles"], ["nw", "ne", "sw", "se"])
        self.assertEqual(by_id["top"]["handles"], [])

class TestCanvasZoom(unittest.TestCase):
    def setUp(self):
        self.canvas = CanvasEditor()

    def test_zoom_step(self):
        self.assertAlmostEqual(self.canvas.zoom_in(), 1.1)
        self.assertAlmostEqual(self.canvas.zoom_out(), 1.0)
        self.assertAlmostEqual(self.canvas.zoom_out(), 0.9)

    def test_zoom_upper_bound(self):
        for _ in range(30):
            self.canvas.zoom_in()
        self.assertEqual(self.canvas.scale, 2.0)
        self.assertEqual(self.canvas.zoom_label, "200%")

    def test_zoom_lower_bound(self):
        for _ in range(30):
            self.canvas.zoom_out()
        self.assertEqual(self.canvas.scale, 0.5)
        self.assertEqual(self.canvas.zoom_label, "50%")

    def test_wheel_requires_ctrl(self):
        self.assertFalse(self.canvas.wheel(100, ctrl_key=False))
        self.assertEqual(self.canvas.scale, 1.0)

    def test_wheel_direction(self):
        self.assertTrue(self.canvas.wheel(100, ctrl_key=True))
        self.assertAlmostEqual(self.canvas.scale, 0.9)

        self.canvas.wheel(-100, ctrl_key=True)
        self.canvas.wheel(-100, ctrl_key=True)
        self.assertAlmostEqual(self.canvas.scale, 1.1)

    def test_zoom_does_not_change_size(self):
        canvas = CanvasEditor(components=[make_button()])
        canvas.zoom_in()
        self.assertEqual(canvas.components[0].width, 120)
        self.assertAlmostEqual(canvas.view()["grid_size"], 22)

class TestCanvasResize(unittest.TestCase):
    def setUp(self):
        self.canvas = CanvasEditor(components=[make_button()])
        self.canvas.click(110, 110)

    def test_resize_requires_selection(self):
        canvas = CanvasEditor(components=[make_button()])
        self.assertFalse(canvas.pointer_down_handle("c1", "se", 220, 140))

    def test_resize_only_on_selected_component(self):
        canvas = CanvasEditor(components=[make_button(), make_button("c2", 300, 300)])
        canvas.click(110, 110)

        self.assertFalse(canvas.pointer_down_handle("c2", "se", 420, 340))
        self.assertIsNone(canvas.resize_handle)
        self.assertIsNone(canvas.pointer_move(500, 500))
        self.assertEqual(canvas.components[1].width, 120)

    def test_resize_unknown_handle(self):
        self.assertFalse(self.canvas.pointer_down_handle("c1", "north", 220, 140))

    def test_resize_south_east(self):
        self.canvas.pointer_down_handle("c1", "se", 220, 140)
        updated = self.canvas.pointer_move(250, 160)

        self.assertEqual((updated.x, updated.y), (100, 100))
        self.assertEqual((updated.width, updated.height), (150, 60))

    def test_resize_scales_with_zoom(self):
        self.canvas.set_scale(2.0)
        self.canvas.pointer_down_handle("c1", "se", 440, 280)
        updated = self.canvas.pointer_move(480, 300)

        self.assertEqual((updated.width, updated.height), (140, 50))

    def test_resize_north_west_min_size(self):
        self.canvas.pointer_down_handle("c1", "nw", 100, 100)
        updated = self.canvas.pointer_move(700, 700)

        self.assertEqual((updated.width, updated.height), (10, 10))
        # Opposite corner stays put
        self.assertEqual((updated.x + updated.width, updated.y + updated.height), (220, 140))

    def test_resize_north_west_clamps_origin(self):
        self.canvas.pointer_down_handle("c1", "nw", 100, 100)
        updated = self.canvas.pointer_move(-400, -400)

        self.assertEqual((updated.x, updated.y), (0, 0))
        self.assertEqual((updated.width, updated.height), (220, 140))

    def test_unmount_drops_gesture(self):
        self.canvas.pointer_down_handle("c1", "se", 220, 140)
        self.canvas.unmount()

        self.assertIsNone(self.canvas.resize_handle)
        self.assertIsNone(self.canvas.pointer_move(300, 300))

if __name__ == '__main__':
    unittest.main()

import logging
import time

import dearpygui.dearpygui as dpg

import constants
from tearcloth.tunables import slider_defaults

logger = logging.getLogger(__name__)


def _make_callbacks(shared):
    def slider_cb(sender, app_data, user_data):
        try:
            shared[user_data] = float(app_data)
        except (TypeError, ValueError):
            logger.warning("slider %s sent a non-numeric value %r", user_data, app_data)
    def defaults_cb():
        for name, (_, _, value, _) in constants.SLIDERS.items():
            shared[name] = value
            dpg.set_value(f"{name}_slider", value)
    def redraw_cb():
        shared['reset_cloth'] = True
    def fps_cb(sender, app_data, user_data):
        shared['show_fps'] = bool(app_data)
    def exit_cb():
        shared['__exit__'] = True
    return slider_cb, defaults_cb, redraw_cb, fps_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes slider values into `shared`.
    """
    dpg.create_context()

    slider_cb, defaults_cb, redraw_cb, fps_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Cloth Controls", tag="controls_window", width=380, height=360):
        dpg.add_text("Cloth tuning")
        dpg.add_spacer()
        for name, (title, min_value, value, max_value) in constants.SLIDERS.items():
            dpg.add_text(title)
            fmt = "%.2f" if max_value < 1.0 else "%.1f"
            dpg.add_slider_float(label=title, tag=f"{name}_slider",
                                 default_value=float(shared.get(name, value)),
                                 min_value=min_value, max_value=max_value, format=fmt,
                                 callback=slider_cb, user_data=name)
        dpg.add_separator()
        dpg.add_checkbox(label="Show Frame Rates", tag="fps_checkbox",
                         default_value=bool(shared.get('show_fps', False)), callback=fps_cb)
        with dpg.group(horizontal=True):
            dpg.add_button(label="Reset", callback=lambda s, a, u: defaults_cb())
            dpg.add_button(label="Redraw Cloth", callback=lambda s, a, u: redraw_cb())
            dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Cloth Controls', width=400, height=400)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = (f"particles={shared.get('particle_count', 0)}, "
                      f"constraints={shared.get('constraint_count', 0)}, "
                      f"focus={float(shared.get('focus_radius', constants.DEFAULT_FOCUS_AREA)):.0f}")
            dpg.set_value("status_text", status)

            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared.update(slider_defaults())
    run_gui(shared)

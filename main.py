import argparse
import cProfile
import logging
import time
from multiprocessing import Manager, Process

import pygame

import constants
from constants import BACKGROUND, BLACK, CLOTH_COLOR, FOCUS_COLOR, FPS, HEIGHT, PIN_COLOR, WIDTH
from tearcloth.cloth import Cloth
from tearcloth.pointer import PointerState
from tearcloth.tunables import Tunables, slider_defaults

logger = logging.getLogger(__name__)


def cloth_anchor(width, height, cloth_width):
    """Top-left position that centers the cloth horizontally."""
    return (width - cloth_width) // 2, int(height * constants.CLOTH_TOP_RATIO)


def make_cloth(width, height):
    cloth_w = width
    cloth_h = int(height * constants.CLOTH_HEIGHT_RATIO)
    return Cloth(cloth_w, cloth_h, constants.CLOTH_SPACING, constants.CLOTH_FRICTION)


def resize_offset(old_size, new_size):
    # pinned particles follow the window: half the horizontal change, a quarter of the vertical
    return ((new_size[0] - old_size[0]) * 0.5, (new_size[1] - old_size[1]) * 0.25)


def draw_cloth(screen, cloth):
    """Helper to draw the live constraints and the pinned particles."""
    segments = cloth.segments().astype(int)
    selected = cloth.selection()
    # focused lines go on top
    for color, segs in ((CLOTH_COLOR, segments[~selected]), (FOCUS_COLOR, segments[selected])):
        for a, b in segs.tolist():
            pygame.draw.line(screen, color, a, b, 1)
    for x, y in cloth.pinned_positions().astype(int).tolist():
        pygame.draw.circle(screen, PIN_COLOR, (x, y), 2)


def draw_focus(screen, pointer, tunables):
    radius = int(tunables.focus_radius(pointer.focus_radius))
    pygame.draw.circle(screen, FOCUS_COLOR, (int(pointer.pos.x), int(pointer.pos.y)), radius, 1)


def draw_help(screen, font, small_font):
    lines = [(font, "Quick help")] + [(small_font, f"{key}: {desc}") for key, desc in constants.HELP_COMMANDS]
    width = max(f.size(text)[0] for f, text in lines) + 40
    height = sum(f.get_linesize() + 6 for f, _ in lines) + 30
    x = (screen.get_width() - width) // 2
    y = (screen.get_height() - height) // 2

    panel = pygame.Surface((width, height), pygame.SRCALPHA)
    panel.fill((255, 255, 255, 220))
    screen.blit(panel, (x, y))
    pygame.draw.rect(screen, PIN_COLOR, (x, y, width, height), 1)

    y += 15
    for f, text in lines:
        surf = f.render(text, True, BLACK)
        screen.blit(surf, (x + 20, y))
        y += f.get_linesize() + 6


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tearable cloth simulation")
    parser.add_argument("--cpuprofile", metavar="FILE", default="",
                        help="write a CPU profile to this file")
    parser.add_argument("--no-gui", action="store_true",
                        help="run without the slider control window")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    profiler = cProfile.Profile() if args.cpuprofile else None

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("2D Cloth Simulation")
    clock = pygame.time.Clock()

    font = pygame.font.Font(None, 28)
    small_font = pygame.font.Font(None, 22)

    # --- Simulation state ---
    window_size = (WIDTH, HEIGHT)
    cloth = make_cloth(*window_size)
    cloth.init(*cloth_anchor(window_size[0], window_size[1], cloth.width))
    pointer = PointerState()
    tunables = Tunables.defaults()
    offset = (0.0, 0.0)
    hold_start = None
    show_help = False

    # spawn DearPyGui controller process (protected inside main)
    gui_proc = None
    if args.no_gui:
        shared = slider_defaults()
    else:
        import gui_controller as gui_ctrl

        _mgr = Manager()
        shared = _mgr.dict()
        shared.update(slider_defaults())
        gui_proc = Process(target=gui_ctrl.run_gui, args=(shared,), daemon=True)
        gui_proc.start()
    shared['reset_cloth'] = False
    shared['show_fps'] = False
    shared['__exit__'] = False

    running = True
    if profiler is not None:
        profiler.enable()

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                new_size = (event.w, event.h)
                offset = resize_offset(window_size, new_size)
                window_size = new_size
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
                pointer.update_position(*event.pos)
                if event.button == 1:
                    pointer.press_left(ctrl=bool(pygame.key.get_mods() & pygame.KMOD_CTRL))
                    hold_start = time.perf_counter()
                    show_help = False
                else:
                    pointer.press_right()
            elif event.type == pygame.MOUSEBUTTONUP and event.button in (1, 3):
                pointer.release()
                hold_start = None
            elif event.type == pygame.MOUSEMOTION:
                pointer.update_position(*event.pos)
                pointer.set_dragging(event.buttons[0])
            elif event.type == pygame.MOUSEWHEEL:
                pointer.scroll(event.y * constants.SCROLL_STEP)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    cloth.reset(*cloth_anchor(window_size[0], window_size[1], cloth.width), tunables)
                elif event.key == pygame.K_F1:
                    show_help = not show_help
                elif event.key == pygame.K_ESCAPE:
                    show_help = False
                elif event.key in (pygame.K_LCTRL, pygame.K_RCTRL) and pointer.left_down:
                    pointer.set_ctrl_down(True)
            elif event.type == pygame.KEYUP:
                if event.key in (pygame.K_LCTRL, pygame.K_RCTRL):
                    pointer.set_ctrl_down(False)

        # holding the primary button keeps building up pressure
        if pointer.left_down and hold_start is not None:
            pointer.set_force((time.perf_counter() - hold_start) * constants.FORCE_RATE)

        # --- Handle GUI updates ---
        try:
            tunables = Tunables.from_shared(shared, tunables)
            if shared.get('reset_cloth', False):
                cloth.reset(*cloth_anchor(window_size[0], window_size[1], cloth.width), tunables)
                shared['reset_cloth'] = False
            if shared.get('__exit__', False):
                running = False
        except (OSError, EOFError) as exc:
            # the controller process went away; keep running on the last snapshot
            logger.warning("lost connection to the slider window: %s", exc)
            shared = dict(tunables._asdict(), reset_cloth=False, show_fps=False, __exit__=False)

        # --- Update ---
        cloth.update(pointer, tunables, constants.DT, window_size[0], window_size[1], offset)
        pointer.end_frame()
        offset = (0.0, 0.0)

        # --- Draw ---
        screen.fill(BACKGROUND)
        draw_cloth(screen, cloth)
        draw_focus(screen, pointer, tunables)

        if shared.get('show_fps', False):
            fps_surf = font.render(f"{clock.get_fps():.0f} FPS", True, BLACK)
            screen.blit(fps_surf, (10, 10))
        if show_help:
            draw_help(screen, font, small_font)

        try:
            shared['particle_count'] = sum(1 for _ in cloth.live_particles())
            shared['constraint_count'] = len(cloth.constraints)
            shared['focus_radius'] = pointer.focus_radius
        except (OSError, EOFError) as exc:
            logger.debug("could not publish stats: %s", exc)

        pygame.display.flip()
        clock.tick(FPS)

    if profiler is not None:
        profiler.disable()
        profiler.dump_stats(args.cpuprofile)
        logger.info("CPU profile written to %s", args.cpuprofile)

    # cleanup: signal GUI to exit and join
    if gui_proc is not None:
        try:
            shared['__exit__'] = True
        except (OSError, EOFError) as exc:
            logger.debug("slider window already gone: %s", exc)
        gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()

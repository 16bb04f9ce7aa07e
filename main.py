import argparse
import sys
from pathlib import Path

import pygame

from settings import TITLE
from engine.config import load_config
from engine.error_handler import DayNightError, get_logger, log_error
from engine.scene import Scene
from systems.day_night import DayNightDriver
from telemetry.logger import telemetry
from ui.sky_renderer import SkyRenderer
from world.time.environment_light import EnvironmentLight

TELEMETRY_FILE = Path(__file__).resolve().parent / "logs" / "telemetry.jsonl"

log = get_logger("main")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Day/night cycle demo")
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Frame rate cap (default: from config)"
    )
    parser.add_argument(
        "--day-length",
        type=float,
        default=None,
        help="Seconds of frame time per full day (default: from config, 60)"
    )
    parser.add_argument(
        "--attach-delay",
        type=float,
        default=None,
        help="Seconds before the EnvironmentLight is attached to the entity"
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Stop after this many frames (0 = run until the window is closed)"
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    try:
        config = load_config()
        if args.fps is not None:
            config.fps = args.fps
        if args.day_length is not None:
            config.day_length_seconds = args.day_length
        if args.attach_delay is not None:
            config.attach_delay_seconds = args.attach_delay
        config.validate()
    except DayNightError as e:
        log_error(e, "load_config")
        print(e.user_message)
        sys.exit(2)

    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode(config.get_resolution())

    telemetry.init(TELEMETRY_FILE)

    # --- Scene: one entity carrying the day/night behavior ---
    scene = Scene(fps=config.fps)
    sky = scene.create_entity("sky")
    driver = DayNightDriver(sky, speed=config.speed)
    driver.bind(scene.frame.updated)
    renderer = SkyRenderer()

    # --- Main loop ---
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        # The light shows up late on purpose; the driver waits for it.
        if not sky.has_component(EnvironmentLight.type_name) and scene.frame.elapsed >= config.attach_delay_seconds:
            sky.add_component(EnvironmentLight())
            log.info("EnvironmentLight attached after %.2fs", scene.frame.elapsed)

        scene.frame.tick()

        light = driver.environment
        if light is not None:
            telemetry.observe_time_of_day(light.current_time)

        renderer.draw(screen, light)
        pygame.display.flip()

        if args.frames and scene.frame.frame_count >= args.frames:
            running = False

    telemetry.log("shutdown", frames=scene.frame.frame_count, days=telemetry.days_completed)
    driver.unbind()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

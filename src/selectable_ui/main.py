import argparse
from datetime import datetime
import logging

import pygame
import pygame.freetype

from selectable_ui.Button import Button
from selectable_ui.CoroutineRunner import CoroutineRunner
from selectable_ui.Settings import Settings
from selectable_ui.Time import Time
from selectable_ui.VerticalLayout import VerticalLayout
from selectable_ui.colors import CHARCOAL

parser = argparse.ArgumentParser(description="Selectable UI demo")
parser.add_argument(
    "--log",
    default="ERROR",
    help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR."
)
parser.add_argument(
    "--log-to-file",
    action="store_true",
    help="Save logs to txt file."
)
parser.add_argument(
    "--settings",
    default="settings.toml",
    help="Path to the settings file. Created with defaults if missing."
)

args, unknown = parser.parse_known_args()

level_name = args.log.upper()
level = getattr(logging, level_name, None)

if not isinstance(level, int):
    raise ValueError(f"Invalid log level: {args.log}")

log_format = "%(asctime)s - %(levelname)s - %(message)s"
handlers = [logging.StreamHandler()]

if args.log_to_file:
    timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
    log_filename = f"{timestamp}.txt"
    handlers.append(logging.FileHandler(log_filename))

logging.basicConfig(
    level=level,
    format=log_format,
    handlers=handlers
)

settings = Settings.create(args.settings)
video = settings.get("video")
time_settings = settings.get("time")

pygame.init()
pygame.freetype.init()
pygame.joystick.init()
joysticks = [pygame.joystick.Joystick(i) for i in range(pygame.joystick.get_count())]

screen = pygame.display.set_mode((video["width"], video["height"]))
pygame.display.set_caption(video["title"])
clock = pygame.time.Clock()
font = pygame.freetype.Font(None, 24)

frame_time = Time(
    time_scale=time_settings["time_scale"],
    max_delta_time=time_settings["max_delta_time"]
)
runner = CoroutineRunner()

running = True


def on_quit() -> None:
    global running
    running = False


layout = VerticalLayout(padding_x=40)
layout.set_position(0, 40)

hello_button = Button.from_settings(
    "Say hello",
    font,
    runner,
    frame_time,
    settings.get("button"),
    callback=lambda: logging.info("Hello!")
)
quit_button = Button.from_settings(
    "Quit",
    font,
    runner,
    frame_time,
    settings.get("button"),
    callback=on_quit
)
layout.add(hello_button)
layout.add(quit_button)
layout.select_next()

while running:
    frame_time.tick()

    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            on_quit()

        elif event.type == pygame.KEYDOWN and event.key == pygame.K_TAB:
            layout.select_next()

        elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
            # Pausing only stops scaled time, button fades keep running
            frame_time.time_scale = 0.0 if frame_time.time_scale else 1.0
            logging.info(f"Time scale set to {frame_time.time_scale}")

        else:
            layout.handle_event(event)

    runner.tick()

    screen.fill(CHARCOAL)
    layout.draw(screen)
    pygame.display.flip()

    clock.tick(video["fps"])

pygame.quit()

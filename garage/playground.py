"""Interactive playground: pick a vehicle with the number keys, drive it with Enter.

Controls:
- 1..4 assign the vehicle registered at that position (Vehicle, Car,
  Motorcycle, Bicycle)
- ENTER or D drives the player once
- C clears the on-screen log
- ESC or closing the window quits
"""
from collections import deque

import pygame

from garage.player import Player, UnassignedVehicle
from garage.vehicles import create_vehicle, vehicle_names

DESIGN_W = 640
DESIGN_H = 360
LOG_CAPACITY = 12

_NUMBER_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4,
                pygame.K_5, pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9)
_DRIVE_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_d)


def vehicle_for_key(key):
    """Registry name bound to a number key, or None."""
    if key not in _NUMBER_KEYS:
        return None
    idx = _NUMBER_KEYS.index(key)
    names = vehicle_names()
    if idx >= len(names):
        return None
    return names[idx]


class MessageLog:
    """File-like sink keeping the last `capacity` complete lines for the HUD."""

    def __init__(self, capacity=LOG_CAPACITY):
        self._lines = deque(maxlen=capacity)
        self._partial = ''

    def write(self, text):
        self._partial += text
        *done, self._partial = self._partial.split('\n')
        self._lines.extend(done)
        return len(text)

    def flush(self):
        pass

    def lines(self):
        return list(self._lines)

    def clear(self):
        self._lines.clear()
        self._partial = ''


class Playground:
    """Routes key presses to a Player and shows what its vehicles say."""

    def __init__(self, player=None, log=None, presence=None):
        self.player = player if player is not None else Player()
        self.log = log if log is not None else MessageLog()
        # presence is the rpc module (or anything with show_player); optional
        self.presence = presence
        self.running = True

    def select(self, name):
        vehicle = create_vehicle(name)
        if vehicle is None:
            return False
        self.player.set_vehicle(vehicle)
        self.log.write(f"> {name} assigned\n")
        if self.presence is not None:
            try:
                self.presence.show_player(self.player)
            except Exception as e:
                print("Playground: presence update failed:", e)
        return True

    def drive(self):
        try:
            self.player.drive(self.log)
        except UnassignedVehicle as e:
            self.log.write(f"! {e}\n")
            return False
        return True

    def handle_event(self, event):
        """Returns True when the event was consumed."""
        if event.type == pygame.QUIT:
            self.running = False
            return True
        if event.type != pygame.KEYDOWN:
            return False

        if event.key == pygame.K_ESCAPE:
            self.running = False
            return True
        if event.key in _DRIVE_KEYS:
            self.drive()
            return True
        if event.key == pygame.K_c:
            self.log.clear()
            return True
        name = vehicle_for_key(event.key)
        if name is not None:
            return self.select(name)
        return False

    def draw(self, surf, font):
        surf.fill((24, 26, 32))
        current = self.player.vehicle
        label = getattr(current, 'name', None) or 'none'
        header = f"Vehicle: {label}   " + "  ".join(
            f"{i}={n}" for i, n in enumerate(vehicle_names(), start=1))
        surf.blit(font.render(header, True, (240, 220, 24)), (12, 10))

        line_h = font.get_linesize()
        y = 16 + line_h * 2
        for line in self.log.lines():
            color = (230, 90, 90) if line.startswith('!') else (220, 220, 220)
            surf.blit(font.render(line, True, color), (12, y))
            y += line_h

        hint = font.render("1-4 pick  ENTER drive  C clear  ESC quit", True, (140, 140, 150))
        surf.blit(hint, (12, surf.get_height() - line_h - 8))


def run(presence=None):
    pygame.init()
    screen = pygame.display.set_mode((DESIGN_W, DESIGN_H), pygame.RESIZABLE)
    pygame.display.set_caption('Garage - pick a vehicle and drive')
    clock = pygame.time.Clock()
    font = pygame.font.SysFont('Arial', 16)

    playground = Playground(presence=presence)
    if presence is not None:
        presence.set_menu()

    try:
        while playground.running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    continue
                playground.handle_event(event)

            playground.draw(screen, font)
            pygame.display.flip()
    finally:
        pygame.quit()

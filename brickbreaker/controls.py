import pygame

RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
LAUNCH_KEYS = (pygame.K_SPACE,)


class Controls:
    """Held-key state for the paddle plus a pending launch request."""

    def __init__(self):
        self.multiplier = 0
        self.launch_requested = False

    def key_down(self, key):
        if key in RIGHT_KEYS:
            self.multiplier = 1
        elif key in LEFT_KEYS:
            self.multiplier = -1
        elif key in LAUNCH_KEYS:
            self.launch_requested = True

    def key_up(self, key):
        # Only stop if this key set the current direction, so rolling from
        # one arrow to the other doesn't halt the paddle
        if key in RIGHT_KEYS and self.multiplier == 1:
            self.multiplier = 0
        elif key in LEFT_KEYS and self.multiplier == -1:
            self.multiplier = 0

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.key_up(event.key)

    def consume_launch(self):
        requested = self.launch_requested
        self.launch_requested = False
        return requested

    def release_all(self):
        self.multiplier = 0

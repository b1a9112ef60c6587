import pygame

from brickbreaker.controls import Controls


def test_direction_keys_set_multiplier():
    controls = Controls()
    controls.key_down(pygame.K_RIGHT)
    assert controls.multiplier == 1
    controls.key_down(pygame.K_a)
    assert controls.multiplier == -1
    controls.key_down(pygame.K_d)
    assert controls.multiplier == 1


def test_key_up_only_clears_its_own_direction():
    controls = Controls()
    controls.key_down(pygame.K_RIGHT)
    controls.key_down(pygame.K_LEFT)
    controls.key_up(pygame.K_RIGHT)
    assert controls.multiplier == -1
    controls.key_up(pygame.K_LEFT)
    assert controls.multiplier == 0


def test_space_requests_launch_once():
    controls = Controls()
    controls.key_down(pygame.K_SPACE)
    assert controls.multiplier == 0
    assert controls.consume_launch()
    assert not controls.consume_launch()


def test_handle_event_dispatches_key_events():
    controls = Controls()
    controls.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    assert controls.multiplier == -1
    controls.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert controls.multiplier == 0


def test_release_all_stops_paddle():
    controls = Controls()
    controls.key_down(pygame.K_RIGHT)
    controls.release_all()
    assert controls.multiplier == 0

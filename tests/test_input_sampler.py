# pylint: disable=no-member
import pygame
from src.pong.input_sampler import InputSampler, Intent, translate
from src.models.pong import PaddleDirection
from tests.helpers import ScriptedEvents


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def sample(state, *events):
    InputSampler(ScriptedEvents(list(events))).sample(state)


def test_translate_designated_keys():
    assert translate(key_down(pygame.K_w)) == Intent.PADDLE_UP
    assert translate(key_down(pygame.K_s)) == Intent.PADDLE_DOWN
    assert translate(key_down(pygame.K_ESCAPE)) == Intent.QUIT
    assert translate(pygame.event.Event(pygame.QUIT)) == Intent.QUIT


def test_translate_ignores_other_events():
    assert translate(key_down(pygame.K_a)) is None
    assert translate(pygame.event.Event(pygame.KEYUP, key=pygame.K_w)) is None
    assert translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1)) is None


def test_up_and_down_keys_set_direction(state):
    sample(state, key_down(pygame.K_w))
    assert state.dir_paddle == PaddleDirection.UP

    sample(state, key_down(pygame.K_s))
    assert state.dir_paddle == PaddleDirection.DOWN


def test_last_direction_in_a_frame_wins(state):
    sample(state, key_down(pygame.K_s), key_down(pygame.K_a), key_down(pygame.K_w))
    assert state.dir_paddle == PaddleDirection.UP
    assert state.is_running


def test_escape_and_window_close_stop_the_game(state):
    sample(state, key_down(pygame.K_ESCAPE))
    assert not state.is_running

    state.is_running = True
    sample(state, pygame.event.Event(pygame.QUIT))
    assert not state.is_running


def test_events_after_quit_are_harmless(state):
    sample(state, pygame.event.Event(pygame.QUIT), key_down(pygame.K_s))
    assert not state.is_running
    assert state.dir_paddle == PaddleDirection.DOWN


def test_empty_queue_changes_nothing(state):
    before = state.model_copy(deep=True)
    events = ScriptedEvents()
    InputSampler(events).sample(state)
    assert events.polls == 1
    assert state == before

from exertion.events import MessageEvent
from exertion.game.enums import EffectKind, MovementMode
from exertion.game.tuning import TuningOptions
from tests.helpers import TURN_MOVES, EventRecorder, make_character


def test_new_character_starts_rested() -> None:
    character = make_character()
    assert character.get_stamina() == character.get_stamina_max() == 10000
    assert character.movement_mode_is(MovementMode.WALK)
    assert character.get_pain() == 0


def test_stamina_max_comes_from_tuning() -> None:
    character = make_character(TuningOptions({"PLAYER_MAX_STAMINA": 500}))
    assert character.get_stamina_max() == 500
    assert character.get_stamina() == 500


def test_explicit_stamina_max_wins() -> None:
    character = make_character(stamina_max=42)
    assert character.get_stamina_max() == 42


def test_rested_character_can_run() -> None:
    character = make_character()
    assert character.can_run()
    assert character.set_movement_mode(MovementMode.RUN) == MovementMode.RUN


def test_winded_character_falls_back_to_walking() -> None:
    recorder = EventRecorder(MessageEvent)
    character = make_character()
    character.set_movement_mode(MovementMode.CROUCH)
    character.mod_stamina(-(character.get_stamina() + 1))
    assert not character.can_run()
    assert character.set_movement_mode(MovementMode.RUN) == MovementMode.WALK
    assert character.movement_mode_is(MovementMode.WALK)
    assert any("too tired" in e.text for e in recorder.events)


def test_exhausted_character_cannot_run() -> None:
    character = make_character()
    character.set_stamina(0)
    assert not character.has_effect(EffectKind.WINDED)
    assert not character.can_run()


def test_process_moves_burns_then_regenerates() -> None:
    character = make_character()
    character.set_stamina(5000)
    character.process_moves(TURN_MOVES, moving=True)
    # Walking burns 15 per turn, resting regains 20 per move point.
    assert character.get_stamina() == 5000 - 15 + 2000


def test_process_moves_idle_only_regenerates() -> None:
    character = make_character()
    character.set_stamina(5000)
    character.process_moves(TURN_MOVES, moving=False)
    assert character.get_stamina() == 7000


def test_winded_wears_off_after_its_duration() -> None:
    recorder = EventRecorder(MessageEvent)
    character = make_character(TuningOptions({"WINDED_DURATION_TURNS": 2}))
    character.mod_stamina(-(character.get_stamina() + 1))
    assert character.update_turn() == []
    assert character.has_effect(EffectKind.WINDED)
    expired = character.update_turn()
    assert [e.kind for e in expired] == [EffectKind.WINDED]
    assert not character.has_effect(EffectKind.WINDED)
    assert character.can_run() is False  # still at zero stamina
    assert any("catches their breath" in e.text for e in recorder.events)


def test_reset_restores_full_stamina() -> None:
    character = make_character()
    character.set_stamina(3)
    character.stamina.reset()
    assert character.get_stamina() == character.get_stamina_max()

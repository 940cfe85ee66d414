"""Tests for the game loop, the terminal agent and the terminal UI."""

import random

from conftest import card, cards, rigged_engine
from unobot.agents.human_agent import HumanAgent
from unobot.engine import CallUno, Color, DrawCard, GameEngine, NewGame, PlayCard, PlayerView, Stats
from unobot.orchestration import GameRunner, run_simulation
from unobot.orchestration.simulation import bot_players
from unobot.ui.terminal import TerminalUI


class ScriptedAgent:
    """Returns queued actions, then quits."""

    def __init__(self, actions, play_again=()):
        self._actions = list(actions)
        self._play_again = list(play_again)
        self.views = []

    @property
    def name(self) -> str:
        return "scripted"

    def get_action(self, player_view, playable):
        self.views.append((player_view, playable))
        return self._actions.pop(0) if self._actions else None

    def confirm_new_game(self) -> bool:
        return self._play_again.pop(0) if self._play_again else False


def scripted_input(*lines):
    queue = list(lines)

    def read(prompt: str) -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read


def test_bot_only_game_finishes() -> None:
    engine = GameEngine(players=bot_players(), rng=random.Random(3))
    sleeps = []
    result = GameRunner(engine, bot_delay=0.5, sleep=sleeps.append).run()
    assert result.player_names == ("Bot1", "Bot2")
    assert result.num_turns > 0
    if result.winner is not None:
        assert engine.game_over
        assert engine.snapshot().total_cards() == 108
    assert sleeps and all(s == 0.5 for s in sleeps)


def test_human_quits_immediately(engine: GameEngine) -> None:
    agent = ScriptedAgent([])
    result = GameRunner(engine, agent=agent, bot_delay=0).run()
    assert result.winner is None
    assert result.num_turns == 0
    view, playable = agent.views[0]
    assert view.is_my_turn
    assert len(view.my_hand) == 7
    assert playable == engine.get_playable_indices()


def test_bot_moves_after_human_turn() -> None:
    engine = rigged_engine(cards("g1", "g2"), cards("r1", "rskip"), card("r3"), cards("y1"))
    agent = ScriptedAgent([DrawCard()])
    messages = []
    ui = TerminalUI(echo=messages.append)
    result = GameRunner(engine, agent=agent, ui=ui, bot_delay=0).run()
    # bot plays skip, keeps the turn and then goes out
    assert result.winner == "Bot"
    assert engine.stats == Stats(wins=0, losses=1)
    assert any("You Lose!" in m for m in messages)


def test_human_wins_through_runner() -> None:
    engine = rigged_engine(cards("r1", "r2"), cards("b5", "b6"), card("r3"), cards("g1", "g2"))
    agent = ScriptedAgent([CallUno(), PlayCard(hand_index=0), PlayCard(hand_index=0)])
    result = GameRunner(engine, agent=agent, bot_delay=0).run()
    # the bad UNO call is reported, not fatal
    assert result.winner == "You"
    assert result.num_turns == 3
    assert engine.stats == Stats(wins=1, losses=0)


def test_new_game_action_restarts() -> None:
    engine = GameEngine(rng=random.Random(8))
    agent = ScriptedAgent([NewGame()])
    GameRunner(engine, agent=agent, bot_delay=0).run()
    assert len(agent.views) == 2
    assert engine.snapshot().total_cards() == 108


def test_play_loops_while_agent_wants_more() -> None:
    engine = rigged_engine(cards("r1"), cards("b1"), card("r3"))
    agent = ScriptedAgent([PlayCard(hand_index=0), PlayCard(hand_index=0)], play_again=[True, False])
    results = GameRunner(engine, agent=agent, bot_delay=0).play()
    assert [r.winner for r in results] == ["You", "You"]
    assert engine.stats == Stats(wins=2, losses=0)


def test_runner_reports_invalid_move() -> None:
    engine = rigged_engine(cards("g1"), cards("b1"), card("r3"))
    agent = ScriptedAgent([PlayCard(hand_index=0)])
    # human cannot play g1, is told so and then quits
    result = GameRunner(engine, agent=agent, bot_delay=0).run()
    assert result.winner is None


def test_simulation_is_reproducible() -> None:
    wins_a, results_a = run_simulation(num_games=3, seed=11)
    wins_b, results_b = run_simulation(num_games=3, seed=11)
    assert wins_a == wins_b
    assert [r.num_turns for r in results_a] == [r.num_turns for r in results_b]
    assert sum(wins_a.values()) <= 3


def test_human_agent_parses_commands() -> None:
    engine = rigged_engine(cards("r1", "r2", "r4", "b5"), cards("b1", "b2", "b3", "b4"), card("r3"))
    view = PlayerView.from_snapshot(engine.snapshot(), 0)
    agent = HumanAgent(input_fn=scripted_input("x", "99", "d", "u", "n", "3"))
    assert agent.get_action(view, []) == DrawCard()
    assert agent.get_action(view, []) == CallUno()
    assert agent.get_action(view, []) == NewGame()
    action = agent.get_action(view, [])
    assert isinstance(action, PlayCard)
    assert action.hand_index == 3
    assert agent.get_action(view, []) is None


def test_human_agent_asks_color_for_wild() -> None:
    engine = rigged_engine(cards("wild", "r1"), cards("b1", "b2"), card("r3"))
    view = PlayerView.from_snapshot(engine.snapshot(), 0)
    agent = HumanAgent(input_fn=scripted_input("0", "purple", "g"))
    assert agent.get_action(view, [0, 1]) == PlayCard(hand_index=0, chosen_color=Color.GREEN)


def test_human_agent_play_again() -> None:
    assert HumanAgent(input_fn=scripted_input("yes")).confirm_new_game()
    assert not HumanAgent(input_fn=scripted_input("n")).confirm_new_game()
    assert not HumanAgent(input_fn=scripted_input()).confirm_new_game()


def test_terminal_ui_render() -> None:
    engine = rigged_engine(cards("r5", "b1"), cards("g1", "g2"), card("r3"))
    lines = []
    TerminalUI(echo=lines.append).render(PlayerView.from_snapshot(engine.snapshot(), 0), [0])
    text = "\n".join(lines)
    assert "Color: RED" in text
    assert "Bot: 2" in text
    assert "You:" not in text
    assert " * 0:" in text
    assert "   1:" in text


def test_shared_name_keeps_seats_apart() -> None:
    engine = rigged_engine(
        cards("g1", "g2"), cards("r1", "rskip"), card("r3"), cards("y1"), names=("Bot", "Bot")
    )
    view = PlayerView.from_snapshot(engine.snapshot(), 0)
    assert view.num_cards_per_player == {0: 2, 1: 2}
    lines = []
    ui = TerminalUI(echo=lines.append)
    ui.render(view, [])
    assert "Opponents: Bot: 2" in "\n".join(lines)

    result = GameRunner(engine, agent=ScriptedAgent([DrawCard()]), ui=ui, bot_delay=0).run()
    assert result.winner == "Bot"
    assert engine.snapshot().winner_index == 1
    assert any("You Lose!" in m for m in lines)
    assert not any("You Win!" in m for m in lines)

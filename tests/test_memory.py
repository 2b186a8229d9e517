"""Tests for Memory Match rules."""

import random
from collections import Counter

import pytest

from pastime.core.memory import (
    ICONS,
    MATCH_DELAY,
    MISMATCH_DELAY,
    Card,
    MemoryState,
    create_deck,
    handle_card_press,
    new_game,
    pending_delay,
    resolve_comparison,
)


# Fixtures
@pytest.fixture
def state():
    """Two pairs in a known order: heart, star, heart, star."""
    cards = (
        Card(id=0, icon="heart"),
        Card(id=1, icon="star"),
        Card(id=2, icon="heart"),
        Card(id=3, icon="star"),
    )
    return MemoryState(cards=cards)


class TestDeck:
    def test_two_of_each_icon(self):
        deck = create_deck(8, random.Random(3))
        counts = Counter(card.icon for card in deck)
        assert len(deck) == 16
        assert set(counts.values()) == {2}
        assert set(counts) == set(ICONS[:8])

    def test_unique_ids(self):
        deck = create_deck(6, random.Random(3))
        assert sorted(card.id for card in deck) == list(range(12))

    def test_all_face_down(self):
        assert not any(card.flipped or card.matched for card in create_deck(4))

    @pytest.mark.parametrize("pairs", [0, len(ICONS) + 1])
    def test_pair_count_range(self, pairs):
        with pytest.raises(ValueError):
            create_deck(pairs)

    def test_new_game(self):
        game = new_game(3, random.Random(1))
        assert game.pair_count == 3
        assert game.moves == 0
        assert not game.is_won


class TestPress:
    def test_first_card_flips(self, state):
        state = handle_card_press(state, 0)
        assert state.cards[0].flipped
        assert state.face_up == (0,)
        assert state.moves == 0
        assert not state.is_checking

    def test_second_card_starts_check(self, state):
        state = handle_card_press(handle_card_press(state, 0), 1)
        assert state.is_checking
        assert state.moves == 1
        assert state.face_up == (0, 1)

    def test_same_card_twice_ignored(self, state):
        state = handle_card_press(state, 0)
        assert handle_card_press(state, 0) is state

    def test_third_card_ignored_while_checking(self, state):
        state = handle_card_press(handle_card_press(state, 0), 1)
        assert handle_card_press(state, 2) is state

    def test_out_of_range_ignored(self, state):
        assert handle_card_press(state, 9) is state


class TestComparison:
    def test_match(self, state):
        state = handle_card_press(handle_card_press(state, 0), 2)
        assert state.pending_match
        assert pending_delay(state) == MATCH_DELAY
        state = resolve_comparison(state)
        assert state.cards[0].matched and state.cards[2].matched
        assert state.matches == 1
        assert state.face_up == ()
        assert not state.is_checking

    def test_mismatch_flips_back(self, state):
        state = handle_card_press(handle_card_press(state, 0), 1)
        assert pending_delay(state) == MISMATCH_DELAY
        state = resolve_comparison(state)
        assert not state.cards[0].flipped and not state.cards[1].flipped
        assert state.matches == 0
        assert state.moves == 1

    def test_matched_card_ignored(self, state):
        state = resolve_comparison(handle_card_press(handle_card_press(state, 0), 2))
        assert handle_card_press(state, 0) is state

    def test_nothing_pending(self, state):
        assert pending_delay(state) is None
        assert resolve_comparison(state) is state

    def test_full_game(self, state):
        for first, second in ((0, 2), (1, 3)):
            state = handle_card_press(handle_card_press(state, first), second)
            state = resolve_comparison(state)
        assert state.is_won
        assert state.moves == 2

"""Pure Memory Match rules - deck building and the pair-comparison state machine."""

import random
from dataclasses import dataclass, replace

ICONS = (
    "heart", "star", "moon", "sunny", "flash", "leaf",
    "flower", "water", "flame", "snow", "cloud", "umbrella",
)
DEFAULT_PAIRS = 8

# Seconds the UI should leave the two cards visible before resolving
MATCH_DELAY = 0.6
MISMATCH_DELAY = 1.0


@dataclass(frozen=True)
class Card:
    id: int
    icon: str
    flipped: bool = False
    matched: bool = False


@dataclass(frozen=True)
class MemoryState:
    cards: tuple[Card, ...]
    face_up: tuple[int, ...] = ()
    moves: int = 0
    matches: int = 0
    is_checking: bool = False

    @property
    def pair_count(self) -> int:
        return len(self.cards) // 2

    @property
    def is_won(self) -> bool:
        return self.matches == self.pair_count

    @property
    def pending_match(self) -> bool:
        """True if the two face-up cards share an icon."""
        if len(self.face_up) != 2:
            return False
        first, second = self.face_up
        return self.cards[first].icon == self.cards[second].icon


def create_deck(pair_count: int = DEFAULT_PAIRS, rng: random.Random | None = None) -> tuple[Card, ...]:
    """Two cards per icon with sequential ids, shuffled."""
    if not 1 <= pair_count <= len(ICONS):
        raise ValueError(f"pair_count must be between 1 and {len(ICONS)}, got {pair_count}")
    rng = rng or random.Random()
    icons = ICONS[:pair_count]
    deck = [Card(id=i, icon=icon) for i, icon in enumerate(icons + icons)]
    rng.shuffle(deck)
    return tuple(deck)


def new_game(pair_count: int = DEFAULT_PAIRS, rng: random.Random | None = None) -> MemoryState:
    return MemoryState(cards=create_deck(pair_count, rng))


def _set_card(cards: tuple[Card, ...], index: int, **changes) -> tuple[Card, ...]:
    return cards[:index] + (replace(cards[index], **changes),) + cards[index + 1:]


def handle_card_press(state: MemoryState, index: int) -> MemoryState:
    """
    Flip a card face up.

    Presses are ignored while a comparison is pending, when two cards are
    already showing, or on a card that is already flipped or matched.
    Flipping the second card starts a comparison; call resolve_comparison()
    once pending_delay() has elapsed.
    """
    if state.is_checking or len(state.face_up) >= 2:
        return state
    if not 0 <= index < len(state.cards):
        return state
    card = state.cards[index]
    if card.flipped or card.matched:
        return state

    cards = _set_card(state.cards, index, flipped=True)
    face_up = state.face_up + (index,)
    if len(face_up) < 2:
        return replace(state, cards=cards, face_up=face_up)
    return replace(state, cards=cards, face_up=face_up, moves=state.moves + 1, is_checking=True)


def pending_delay(state: MemoryState) -> float | None:
    """How long to show the pair before resolving, or None if nothing is pending."""
    if not state.is_checking:
        return None
    return MATCH_DELAY if state.pending_match else MISMATCH_DELAY


def resolve_comparison(state: MemoryState) -> MemoryState:
    """Settle the pending pair: keep a match, flip a mismatch back down."""
    if not state.is_checking:
        return state

    first, second = state.face_up
    cards = state.cards
    matches = state.matches
    if state.pending_match:
        cards = _set_card(cards, first, matched=True)
        cards = _set_card(cards, second, matched=True)
        matches += 1
    else:
        cards = _set_card(cards, first, flipped=False)
        cards = _set_card(cards, second, flipped=False)

    return replace(state, cards=cards, face_up=(), matches=matches, is_checking=False)

import random
from collections import Counter

import pytest

from scrabbler.bag import TOTAL_TILES, Tile, TileBag, make_full_bag
from scrabbler.dictionary import Dictionary
from scrabbler.game import Game
from scrabbler.rack import Rack

COMMON = [
    "AT", "TA", "AN", "NA", "IN", "IT", "TI", "TO", "ON", "NO", "OR", "RE", "ER",
    "EN", "NE", "ES", "IS", "SI", "SO", "OS", "AS", "AE", "OE", "ET", "TE", "DE",
    "ED", "DO", "OD", "ID", "AD", "LA", "AL", "LI", "LO", "EL", "ME", "EM", "MA",
    "AM", "MI", "MO", "OM", "HE", "EH", "HA", "AH", "HI", "HO", "OH", "BE", "BA",
    "AB", "BI", "BO", "GO", "AG", "PA", "PE", "PI", "OP", "UP", "US", "UT", "UN",
    "NU", "MU", "YE", "YA", "AY", "OY", "WE", "OW", "AW", "FA", "FE", "EF", "OF",
    "IF", "AX", "EX", "XI", "OX", "QI", "ZA", "JO", "KA", "KI",
    "EAT", "TEA", "ATE", "ETA", "TAN", "ANT", "NET", "TEN", "TON", "NOT", "RAT",
    "TAR", "ART", "SAT", "SEA", "SET", "TIE", "TIN", "NIT", "ORE", "ROE", "ONE",
    "EON", "DOE", "ODE", "RED", "LED", "OLD", "LID", "AID", "MAD", "HAD", "HAT",
    "BAT", "TAB", "GOT", "TOG", "PAT", "TAP", "APT", "PIT", "TIP", "PUN", "SUN",
    "NUT", "TUN", "YET", "WET", "FAT", "FIT", "TAX", "ZOO", "JOT", "KIT",
    "RATE", "TEAR", "STAR", "RATS", "TOES", "NOTE", "TONE", "DOTE", "LINE",
    "TIDE", "EDIT", "DIET", "SEAT", "EAST", "EATS", "TEAS", "SANE", "LANE",
]


def no_blank_bag(seed):
    tiles = [t for t in make_full_bag() if not t.is_blank]
    return TileBag(tiles, rng=random.Random(seed))


@pytest.fixture
def common_dictionary():
    return Dictionary.from_words(COMMON)


def test_full_bag_distribution():
    bag = make_full_bag()
    assert len(bag) == TOTAL_TILES == 100
    counts = Counter(t.symbol for t in bag)
    assert counts["?"] == 2
    assert counts["E"] == 12
    assert counts["A"] == 9
    assert counts["Z"] == 1


def test_tiles_are_tagged():
    blank = Tile.blank()
    assert blank.is_blank and blank.value == 0 and blank.symbol == "?"
    q = Tile.letter("q")
    assert not q.is_blank and q.value == 10 and q.symbol == "Q"
    assert Tile.from_symbol("?") == blank
    with pytest.raises(ValueError):
        Tile.letter("1")


def test_bag_draws_until_empty():
    bag = TileBag([Tile.letter("E")] * 3, rng=random.Random(0))
    assert len(bag.draw(2)) == 2
    assert len(bag.draw(7)) == 1
    assert bag.draw(7) == []
    assert bag.is_empty()


def test_new_game_deals_seven_each(common_dictionary):
    game = Game.new(common_dictionary, seed=42)
    assert [len(r) for r in game.racks] == [7, 7]
    assert len(game.bag) == 86
    assert game.scores == [0, 0]
    assert game.board.is_board_empty()


def test_same_seed_same_deal(common_dictionary):
    a = Game.new(common_dictionary, seed=5)
    b = Game.new(common_dictionary, seed=5)
    assert [r.symbols() for r in a.racks] == [r.symbols() for r in b.racks]


def test_rack_removes_blanks_by_identity():
    rack = Rack.from_symbols("CA?")
    rack.remove_played("Ct")
    assert rack.symbols() == "A"
    with pytest.raises(ValueError):
        rack.remove_played("x")


def test_rack_refill_stops_at_seven():
    rack = Rack.from_symbols("CAT")
    bag = TileBag([Tile.letter("E")] * 10, rng=random.Random(0))
    drawn = rack.refill(bag)
    assert len(drawn) == 4
    assert len(rack) == 7
    assert len(bag) == 6


def test_rack_total_value_counts_blanks_as_zero():
    assert Rack.from_symbols("CAT?").total_value() == 3 + 1 + 1
    assert Rack.from_symbols("QZ").total_value() == 20
    assert Rack().total_value() == 0


def test_turn_plays_refills_and_scores():
    game = Game(
        Dictionary.from_words(["CAT"]),
        TileBag([Tile.letter("E")] * 10, rng=random.Random(0)),
        [Rack.from_symbols("CATXQZJ"), Rack.from_symbols("QQQ")],
    )
    move = game.play_turn(0)
    assert move is not None
    assert move.word == "CAT"
    assert move.score == 10
    assert game.scores == [10, 0]
    assert game.board.count_tiles() == 3
    assert len(game.racks[0]) == 7
    assert sorted(game.racks[0].symbols()) == sorted("XQZJEEE")
    assert len(game.bag) == 7


def test_pass_leaves_state_unchanged():
    game = Game(
        Dictionary.from_words(["CAT"]),
        TileBag([Tile.letter("E")] * 10, rng=random.Random(0)),
        [Rack.from_symbols("CAT"), Rack.from_symbols("QQQ")],
    )
    game.play_turn(0)
    board_before = str(game.board)
    assert game.play_turn(1) is None
    assert str(game.board) == board_before
    assert game.scores == [10, 0]
    assert game.racks[1].symbols() == "QQQ"
    assert len(game.bag) == 7


def test_blank_goes_on_board_lowercase():
    game = Game(
        Dictionary.from_words(["CAT"]),
        TileBag([], rng=random.Random(0)),
        [Rack.from_symbols("CA?"), Rack.from_symbols("QQ")],
    )
    move = game.play_turn(0)
    assert move is not None and move.score == 8
    letters = {game.board.letter_at(x, y) for _, x, y in move.tiles_used}
    assert letters == {"C", "A", "t"}
    assert game.racks[0].is_empty()
    assert not game.players_have_tiles()


def test_stalemate_ends_the_game():
    game = Game(
        Dictionary.from_words(["CAT"]),
        TileBag([Tile.letter("E")] * 10, rng=random.Random(0)),
        [Rack.from_symbols("QQQ"), Rack.from_symbols("ZZZ")],
    )
    assert game.run() == [0, 0]
    assert game.rounds_played == 1
    assert game.winner() is None


def test_game_runs_to_completion(common_dictionary):
    bag = no_blank_bag(11)
    racks = [Rack(bag.draw(7)), Rack(bag.draw(7))]
    game = Game(common_dictionary, bag, racks)

    history = []
    scores = game.run(on_round=lambda g: history.append(list(g.scores)))

    assert game.rounds_played == len(history)
    assert 0 < game.rounds_played <= TOTAL_TILES
    for earlier, later in zip(history, history[1:]):
        assert all(b >= a for a, b in zip(earlier, later))
    assert scores == game.scores
    if game.players_have_tiles():
        # the loop only stops early after a round in which nobody moved
        previous = history[-2] if len(history) > 1 else [0, 0]
        assert history[-1] == previous

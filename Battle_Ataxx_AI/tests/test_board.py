"""Board mechanics: layout, extend/jump bookkeeping, contagion, undo, pass, blocks, game over."""

import pytest

from Battle_Ataxx_AI.Board import Board, EMPTY, RED, BLUE, BLOCKED, JUMP_LIMIT
from Battle_Ataxx_AI.Move import Move, index, play_squares
from Battle_Ataxx_AI.engine.errors import IllegalMove, IllegalBlockPlacement, NoHistoryToUndo


def position(red=(), blue=(), turn=RED):
    """Board with only the given pieces on an otherwise empty play area."""
    b = Board()
    for _, _, sq in play_squares():
        b.cells[sq] = EMPTY
    for cr in red:
        b.cells[index(*cr)] = RED
    for cr in blue:
        b.cells[index(*cr)] = BLUE
    b.pieces = {RED: len(red), BLUE: len(blue)}
    b.whose_move = turn
    return b


def snapshot(b):
    return (b.cells[:], dict(b.pieces), b.whose_move, b.jumps)


def test_initial_layout():
    b = Board()
    assert b.get("a", "7") is RED and b.get("g", "1") is RED
    assert b.get("a", "1") is BLUE and b.get("g", "7") is BLUE
    assert b.red_pieces() == 2 and b.blue_pieces() == 2
    assert b.whose_move is RED
    assert b.num_jumps() == 0
    assert b.num_moves() == 0
    assert not b.game_over()


def test_border_is_blocked():
    b = Board()
    assert b.get(0) is BLOCKED
    assert b.get("a", "0") is BLOCKED  # row below a1
    assert b.get(chr(ord("g") + 2), "7") is BLOCKED
    assert b.get(index("a", "1")) is BLUE
    assert sum(1 for cell in b.cells if cell is BLOCKED) == 11 * 11 - 49


def test_extend_adds_piece_and_resets_jumps():
    b = Board()
    b.make_move(Move.parse("a7-a5"))
    assert b.num_jumps() == 1
    change = b.make_move(Move.parse("a1-b2"))
    assert change.kind == "move" and change.mover is BLUE
    assert b.num_jumps() == 0
    assert b.blue_pieces() == 3
    assert b.get("a", "1") is BLUE and b.get("b", "2") is BLUE


def test_jump_moves_piece_without_changing_count():
    b = Board()
    b.make_move(Move.parse("a7-a5"))
    assert b.get("a", "7") is EMPTY
    assert b.get("a", "5") is RED
    assert b.red_pieces() == 2
    assert b.num_jumps() == 1
    assert b.whose_move is BLUE


def test_extend_converts_adjacent_opponents():
    b = Board()
    b.make_move(Move.parse("a7-a5"))
    b.make_move(Move.parse("a1-a3"))
    change = b.make_move(Move.parse("a5-a4"))
    assert change.converted == (index("a", "3"),)
    assert b.get("a", "3") is RED
    assert b.red_pieces() == 4
    assert b.blue_pieces() == 1
    assert b.num_jumps() == 0


def test_contagion_only_around_destination():
    b = position(red=[("a", "1")], blue=[("b", "1"), ("d", "1")])
    b.make_move(Move.parse("a1-c1"))
    assert b.get("b", "1") is RED
    assert b.get("d", "1") is RED
    assert b.get("a", "1") is EMPTY

    b = position(red=[("c", "3")], blue=[("b", "3"), ("e", "3")])
    b.make_move(Move.parse("c3-d3"))
    # b3 touches the source but not the destination
    assert b.get("b", "3") is BLUE
    assert b.get("e", "3") is RED


def test_illegal_moves_rejected_without_mutation():
    b = Board()
    before = snapshot(b)
    for text in ("a1-a2", "a7-a4", "b6-b5", "g1-g1"):
        with pytest.raises(IllegalMove):
            b.make_move(Move.parse(text))
    assert snapshot(b) == before
    assert b.num_moves() == 0
    with pytest.raises(IllegalMove):
        b.make_move(None)


def test_legal_move_predicate():
    b = Board()
    assert b.legal_move(Move.parse("a7-b6"))
    assert b.legal_move(Move.parse("a7-c5"))
    assert not b.legal_move(Move.parse("a7-d7"))
    assert not b.legal_move(Move.parse("a1-a2"))  # blue piece, red to move
    assert not b.legal_move(Move.parse("a5-a4"))  # empty source
    assert not b.legal_move(Move.pass_move())


def test_undo_restores_everything():
    b = Board()
    states = [snapshot(b)]
    for text in ("a7-a5", "a1-a3", "a5-a4", "g7-e6", "g1-f2", "e6-e4"):
        b.make_move(Move.parse(text))
        states.append(snapshot(b))
    for expected in reversed(states[:-1]):
        b.undo()
        assert snapshot(b) == expected
    assert b == Board()


def test_undo_after_mixed_extends_and_jumps():
    b = Board()
    for text in ("a7-b7", "g7-e6", "b7-a5", "e6-e5"):
        b.make_move(Move.parse(text))
    b.undo()
    assert b.get(index("e", "5")) is EMPTY
    b.undo()
    b.undo()
    b.undo()
    assert b.get(index("g", "7")) is BLUE
    assert b == Board()


def test_undo_does_not_revert_unrelated_pieces():
    # d3 is red before the move and adjacent to the destination; only the recorded c4 flips back.
    b = position(red=[("a", "3"), ("d", "3")], blue=[("c", "4")])
    before = snapshot(b)
    b.make_move(Move.parse("a3-c3"))
    assert b.get("c", "4") is RED
    b.undo()
    assert snapshot(b) == before
    assert b.get("d", "3") is RED


def test_undo_empty_history_raises():
    with pytest.raises(NoHistoryToUndo):
        Board().undo()


def red_boxed_in():
    blue = [(c, r) for c in "abc" for r in "567" if (c, r) != ("a", "7")]
    return position(red=[("a", "7")], blue=blue)


def test_pass_rules():
    b = Board()
    with pytest.raises(IllegalMove):
        b.pass_turn()
    with pytest.raises(IllegalMove):
        b.make_move(Move.pass_move())

    b = red_boxed_in()
    assert not b.can_move(RED)
    assert b.can_move(BLUE)
    assert not b.game_over()
    assert b.legal_move(Move.pass_move())
    change = b.pass_turn()
    assert change.kind == "pass"
    assert b.whose_move is BLUE
    assert b.all_moves() == [Move.pass_move()]
    b.undo()
    assert b.whose_move is RED
    assert b.num_moves() == 0


def test_can_move_ignores_turn():
    b = Board()
    assert b.can_move(RED) and b.can_move(BLUE)
    assert list(b.legal_moves(BLUE))


def test_legal_moves_are_all_legal():
    b = Board()
    moves = list(b.legal_moves())
    assert len(moves) == 16
    assert all(b.legal_move(m) for m in moves)


def test_game_over_conditions():
    assert not Board().game_over()

    b = Board()
    b.jumps = JUMP_LIMIT
    assert b.game_over()
    b.jumps = JUMP_LIMIT - 1
    assert not b.game_over()

    assert position(red=[("a", "1")], blue=[]).game_over()

    full = position(
        red=[(c, r) for c in "abcdefg" for r in "1234"],
        blue=[(c, r) for c in "abcdefg" for r in "567"],
    )
    assert not full.can_move(RED) and not full.can_move(BLUE)
    assert full.game_over()
    assert full.winner() is RED


def test_jump_limit_reached_by_play():
    b = Board()
    shuttle = ["a7-a5", "a1-a3", "a5-a7", "a3-a1"]
    for i in range(JUMP_LIMIT):
        assert not b.game_over()
        b.make_move(Move.parse(shuttle[i % 4]))
    assert b.num_jumps() == JUMP_LIMIT
    assert b.game_over()


def test_blocks_mirror_across_center():
    b = Board()
    assert b.legal_block("b2")
    change = b.set_block("b", "2")
    expected = {index(c, r) for c, r in (("b", "2"), ("f", "2"), ("b", "6"), ("f", "6"))}
    assert set(change.squares) == expected
    blocked = {sq for _, _, sq in play_squares() if b.get(sq) is BLOCKED}
    assert blocked == expected
    assert not b.legal_block("f6")


def test_center_block_sets_single_square():
    b = Board()
    b.set_block("d4")
    blocked = [sq for _, _, sq in play_squares() if b.get(sq) is BLOCKED]
    assert blocked == [index("d", "4")]


def test_illegal_block_raises():
    b = Board()
    assert not b.legal_block("a1")
    assert not b.legal_block("g7")  # reflection of a1
    assert not b.legal_block("h1")
    with pytest.raises(IllegalBlockPlacement):
        b.set_block("a7")
    assert b.get("a", "7") is RED


def test_malformed_block_square_is_rejected():
    b = Board()
    before = b.clone()
    assert not b.legal_block("a")
    assert not b.legal_block("c33")
    for square in ("a", "", "c33"):
        with pytest.raises(IllegalBlockPlacement):
            b.set_block(square)
    assert b == before


def test_clone_is_independent():
    b = Board()
    b.make_move(Move.parse("a7-b6"))
    c = b.clone()
    assert c == b
    c.make_move(Move.parse("a1-b2"))
    assert c != b
    assert b.num_moves() == 1
    c.undo()
    c.undo()
    assert b.num_moves() == 1
    assert b.get("b", "6") is RED


def test_clear_resets_state():
    b = Board()
    b.set_block("c3")
    b.make_move(Move.parse("a7-b6"))
    b.clear()
    assert b == Board()
    assert b.num_moves() == 0


def test_winner_and_rendering():
    b = Board()
    assert b.winner() is None
    text = str(b).splitlines()
    assert text[0] == "===" and text[-1] == "==="
    assert text[1] == "  r - - - - - b"
    assert text[7] == "  b - - - - - r"

from ulm.tokenizers import Lattice


def test_set_sentence() -> None:
    lattice = Lattice.from_text("test", 1, 2, 3)
    assert len(lattice) == 4
    assert lattice.sentence() == "test"
    assert lattice.bos_node.vocab_id == 1
    assert lattice.eos_node.vocab_id == 2
    assert lattice.bos_node.node_id == 0
    assert lattice.eos_node.node_id == 1
    assert lattice.eos_node.pos == 4
    assert len(lattice.begin_nodes) == len(lattice.end_nodes) == 5
    assert lattice.end_nodes[0] == [0]
    assert lattice.begin_nodes[4] == [1]


def test_insert_indexes_begin_and_end() -> None:
    lattice = Lattice.from_text("ABあい", 1, 2, 3)
    lattice.insert(0, 1, 0.0, 3)  # A
    lattice.insert(1, 1, 0.0, 4)  # B
    lattice.insert(2, 1, 0.0, 5)  # あ
    lattice.insert(3, 1, 0.0, 6)  # い
    lattice.insert(0, 2, 0.0, 7)  # AB
    lattice.insert(1, 3, 0.0, 8)  # Bあい
    lattice.insert(2, 2, 0.0, 9)  # あい

    pieces = [lattice.piece(node) for node in lattice.nodes[2:]]
    assert pieces == ["A", "B", "あ", "い", "AB", "Bあい", "あい"]
    assert [node.node_id for node in lattice.nodes] == list(range(9))

    assert [len(ids) for ids in lattice.begin_nodes] == [2, 2, 2, 1, 1]
    assert [len(ids) for ids in lattice.end_nodes] == [1, 1, 2, 1, 3]
    assert [lattice.piece(lattice.nodes[i]) for i in lattice.end_nodes[4]] == ["い", "Bあい", "あい"]


def test_viterbi_picks_highest_total_score() -> None:
    lattice = Lattice.from_text("ABC", 1, 2, 3)
    lattice.insert(0, 1, 0.0, 3)
    lattice.insert(1, 1, 0.0, 4)
    lattice.insert(2, 1, 0.0, 5)
    assert lattice.tokens() == ["A", "B", "C"]

    lattice.insert(0, 2, 2.0, 6)
    assert lattice.tokens() == ["AB", "C"]

    lattice.insert(1, 2, 5.0, 7)
    assert lattice.tokens() == ["A", "BC"]

    lattice.insert(0, 3, 10.0, 8)
    assert lattice.tokens() == ["ABC"]


def test_viterbi_path_includes_boundaries() -> None:
    lattice = Lattice.from_text("ab", 1, 2, 3)
    lattice.insert(0, 1, -1.0, 4)
    lattice.insert(1, 1, -1.0, 5)
    path = lattice.viterbi()
    assert path[0] is lattice.bos_node
    assert path[-1] is lattice.eos_node
    assert [node.vocab_id for node in path] == [1, 4, 5, 2]


def test_viterbi_ties_prefer_first_inserted() -> None:
    lattice = Lattice.from_text("AB", 1, 2, 3)
    lattice.insert(0, 1, 0.0, 4)
    lattice.insert(1, 1, 0.0, 5)
    lattice.insert(0, 2, 0.0, 6)
    assert lattice.tokens() == ["A", "B"]

    lattice = Lattice.from_text("AB", 1, 2, 3)
    lattice.insert(0, 1, 0.0, 4)
    lattice.insert(0, 2, 0.0, 6)
    lattice.insert(1, 1, 0.0, 5)
    assert lattice.tokens() == ["AB"]


def test_empty_sentence() -> None:
    lattice = Lattice.from_text("", 1, 2, 3)
    assert len(lattice) == 0
    assert [node.node_id for node in lattice.viterbi()] == [0, 1]
    assert lattice.tokens() == []


def test_unreachable_position_truncates_decode() -> None:
    lattice = Lattice.from_text("AB", 1, 2, 3)
    lattice.insert(0, 1, 0.0, 4)
    assert lattice.viterbi() == []
    assert lattice.tokens() == []

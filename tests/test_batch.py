from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from weighted_damlev import InvalidSequenceError
from weighted_damlev.batch import (
    MalformedPairError,
    PairRecord,
    load_pairs,
    pairwise_distances,
    score_pairs,
    write_results,
)
from weighted_damlev.batch.reports import summarise, write_summary
from weighted_damlev.config import CostWeights, DistanceOptions
from weighted_damlev.utils.jsonio import MalformedLineError


def test_pairwise_matrix_against_itself() -> None:
    matrix = pairwise_distances(["ab", "ba", "abc"])
    assert matrix.shape == (3, 3)
    assert matrix.dtype == np.int64
    assert np.all(np.diag(matrix) == 0)
    assert matrix[0, 1] == 1
    assert matrix[1, 0] == 1
    assert matrix[0, 2] == 1
    assert matrix[2, 0] == 1


def test_pairwise_matrix_with_float_weights() -> None:
    matrix = pairwise_distances(["a", "b"], weights={"insert": 0.5})
    assert matrix.dtype == np.float64
    assert matrix[0, 1] == pytest.approx(1.0)


def test_pairwise_matrix_with_separate_targets() -> None:
    matrix = pairwise_distances(["a", "bb"], ["a", "b", "c"], index_aligned=False)
    assert matrix.shape == (2, 3)
    assert matrix[0].tolist() == [0, 1, 1]
    assert matrix[1].tolist() == [2, 1, 2]


def test_pairwise_matrix_rejects_non_sequences() -> None:
    with pytest.raises(InvalidSequenceError):
        pairwise_distances(["a", 1])


def test_load_and_score_pairs(tmp_path: Path) -> None:
    path = tmp_path / "pairs.jsonl"
    path.write_text(
        "\n".join(
            [
                json.dumps({"source": "kitten", "target": "sitting"}),
                "",
                json.dumps({"source": ["the", "cat"], "target": ["cat", "the"]}),
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    pairs = load_pairs(path)
    assert pairs == [("kitten", "sitting"), (("the", "cat"), ("cat", "the"))]

    records = score_pairs(pairs)
    assert [record.distance for record in records] == [3, 1]


def test_score_pairs_uses_options() -> None:
    options = DistanceOptions(weights=CostWeights(swap=0), index_aligned=False)
    records = score_pairs([("ab", "ba"), ("Floor", "Flower")], options)
    assert [record.distance for record in records] == [0, 2]


@pytest.mark.parametrize(
    "row",
    [{"source": "a"}, {"source": 3, "target": "b"}, ["a", "b"]],
)
def test_malformed_pair_rows(tmp_path: Path, row: object) -> None:
    path = tmp_path / "pairs.jsonl"
    path.write_text(json.dumps(row) + "\n", encoding="utf-8")
    with pytest.raises(MalformedPairError):
        load_pairs(path)


def test_invalid_json_line(tmp_path: Path) -> None:
    path = tmp_path / "pairs.jsonl"
    path.write_text('{"source": "a", "target": \n', encoding="utf-8")
    with pytest.raises(MalformedLineError, match=":1:"):
        load_pairs(path)


def test_missing_pair_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_pairs(tmp_path / "missing.jsonl")


def test_write_results_round_trips_symbol_lists(tmp_path: Path) -> None:
    target = tmp_path / "out" / "results.jsonl"
    write_results(target, [PairRecord(source=("a", "b"), target="ba", distance=1)])
    rows = [json.loads(line) for line in target.read_text().splitlines()]
    assert rows == [{"source": ["a", "b"], "target": "ba", "distance": 1}]


def test_summarise_records() -> None:
    records = score_pairs([("kitten", "sitting"), ("same", "same")])
    summary = summarise(records)
    assert summary["num_pairs"] == 2
    assert summary["mean_distance"] == pytest.approx(1.5)
    assert summary["min_distance"] == 0
    assert summary["max_distance"] == 3
    assert summary["zero_distance_rate"] == pytest.approx(0.5)


def test_summarise_empty() -> None:
    summary = summarise([])
    assert summary["num_pairs"] == 0
    assert summary["min_distance"] is None


def test_write_summary_persists_records(tmp_path: Path) -> None:
    records = score_pairs([("ab", "ba")])
    path = write_summary(tmp_path / "summary.json", records)
    payload = json.loads(path.read_text())
    assert payload["summary"]["num_pairs"] == 1
    assert payload["records"][0]["distance"] == 1

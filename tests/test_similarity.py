import numpy as np
import pytest
from scipy.sparse import csr_matrix

from vsm_search.errors import VocabularyMismatchError
from vsm_search.similarity import (
    cosine_similarities,
    cosine_similarity,
    dot_product,
    row_norms,
    vector_magnitude,
)


def test_dot_product():
    assert dot_product([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 14.0


def test_vector_magnitude():
    assert vector_magnitude([1.0, 2.0, 3.0]) == pytest.approx(3.7416573867739413)


def test_cosine_similarity_same():
    assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)


def test_cosine_similarity_orthogonal():
    assert cosine_similarity([4.0, 2.0, 3.0], [2.0, -4.0, 0.0]) == 0.0


@pytest.mark.parametrize(
    "vec",
    [
        [1.0, 2.0, 3.0],
        [0.5, -1.5, 0.0, 4.0],
        [1e-3, 2e3],
    ],
)
def test_cosine_similarity_properties(vec):
    zeros = [0.0] * len(vec)
    other = list(reversed(vec))

    assert cosine_similarity(vec, vec) == pytest.approx(1.0)
    assert cosine_similarity(vec, zeros) == 0.0
    assert cosine_similarity(zeros, zeros) == 0.0
    assert cosine_similarity(vec, other) == cosine_similarity(other, vec)


def test_cosine_similarity_opposite_vectors():
    assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)


def test_cosine_similarity_rejects_different_lengths():
    with pytest.raises(VocabularyMismatchError):
        cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])


def test_cosine_similarities_matches_pairwise():
    rows = np.array(
        [
            [1.0, 0.0, 2.0],
            [0.0, 3.0, 0.0],
            [0.0, 0.0, 0.0],
            [2.0, 1.0, 1.0],
        ]
    )
    query = np.array([1.0, 0.0, 1.0])

    for matrix in (rows, csr_matrix(rows)):
        similarities = cosine_similarities(query, matrix)
        expected = [cosine_similarity(query, row) for row in rows]
        assert similarities == pytest.approx(expected)
        assert similarities[1] == 0.0
        assert similarities[2] == 0.0


def test_cosine_similarities_uses_given_norms():
    rows = csr_matrix(np.array([[3.0, 4.0], [1.0, 0.0]]))
    norms = row_norms(rows)

    assert norms.tolist() == [5.0, 1.0]
    similarities = cosine_similarities(np.array([1.0, 0.0]), rows, norms)
    assert similarities == pytest.approx([0.6, 1.0])


def test_cosine_similarities_rejects_wrong_width():
    with pytest.raises(VocabularyMismatchError):
        cosine_similarities(np.array([1.0, 2.0]), np.ones((2, 3)))

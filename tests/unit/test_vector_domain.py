"""
Тесты для Vector domain — to_vector

Покрывает:
- Приведение int к float
- Произвольные итерируемые источники
- Strict-валидацию (строки, bool, None отклоняются)
- Отсутствие aliasing с входной коллекцией
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import VectorValidationError, to_vector
from src.core.vector import ops as vec


class TestToVector:
    """Тесты to_vector."""

    def test_ints_become_floats(self):
        v = to_vector([1, 2, 3])
        assert v == [1.0, 2.0, 3.0]
        assert all(isinstance(x, float) for x in v)

    def test_mixed_numbers(self):
        assert to_vector([1, 2.5, -3]) == [1.0, 2.5, -3.0]

    def test_range_and_generator(self):
        assert to_vector(range(3)) == vec.inc(3)
        assert to_vector(x / 2 for x in range(3)) == [0.0, 0.5, 1.0]

    def test_tuple_input(self):
        assert to_vector((4.0, 5.0)) == [4.0, 5.0]

    def test_empty(self):
        assert to_vector([]) == []

    def test_non_finite_preserved(self):
        v = to_vector([math.inf, float("nan")])
        assert v[0] == math.inf
        assert math.isnan(v[1])

    def test_fresh_list(self):
        source = [1.0, 2.0]
        v = to_vector(source)
        assert v is not source
        v[0] = 9.0
        assert source == [1.0, 2.0]

    @pytest.mark.parametrize("bad", [["1.5"], [True], [None], [1.0, "x"]])
    def test_non_numeric_rejected(self, bad):
        with pytest.raises(VectorValidationError) as exc_info:
            to_vector(bad)
        assert isinstance(exc_info.value.validation_error, ValidationError)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_int_out_of_float_range_rejected(self):
        """int, не представимый как double, — ошибка валидации, не OverflowError."""
        with pytest.raises(VectorValidationError) as exc_info:
            to_vector([1, 10**400])
        assert exc_info.value.validation_error.error_count() == 1
        assert "too large" in str(exc_info.value.validation_error)

    def test_largest_representable_int_accepted(self):
        assert to_vector([2**1023]) == [float(2**1023)]

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="invalid element"):
            to_vector([1.0, "two", None])

    def test_feeds_vector_ops(self):
        """Результат сразу пригоден для операций."""
        assert vec.dot(to_vector([1, 2, 3]), to_vector([4, 5, 6])) == 32.0

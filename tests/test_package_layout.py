"""Checks on what each subpackage exposes."""

import importlib

import pytest

import combinable
from combinable import generators
from combinable.generators import Generator
from combinable.utils import errors


@pytest.mark.parametrize(
    "module",
    ["combinable", "combinable.generators", "combinable.config", "combinable.config.schema"],
)
def test_all_names_resolve(module: str) -> None:
    mod = importlib.import_module(module)
    for name in mod.__all__:
        assert hasattr(mod, name), f"{module} lists missing name {name}"


def test_generator_classes_share_the_contract() -> None:
    classes = [
        generators.ConstantGenerator,
        generators.IntegerGenerator,
        generators.ByteGenerator,
        generators.CharacterGenerator,
        generators.StringGenerator,
        generators.MappedGenerator,
        generators.FilteredGenerator,
        generators.NullInjectedGenerator,
        generators.UniqueGenerator,
    ]
    for cls in classes:
        assert issubclass(cls, Generator)
        for method in ("sample", "raw_value", "is_fixed", "map", "filter", "inject_null", "unique"):
            assert callable(getattr(cls, method)), f"{cls.__name__}.{method}"


def test_constraint_errors_exported_from_root() -> None:
    assert combinable.FixedValueConstraintFailure is errors.FixedValueConstraintFailure
    assert combinable.RetryBudgetExhausted is errors.RetryBudgetExhausted
    assert issubclass(errors.ConfigurationError, ValueError)
    assert issubclass(errors.RetryBudgetExhausted, errors.ConstraintFailure)
    assert issubclass(errors.FixedValueConstraintFailure, errors.ConstraintFailure)

import logging
import os
import subprocess
import sys
from pathlib import Path

import suite
from dgen import from_schema
from eachy import (
    E, Enumerable, IEnumerable, Traversable, STOP,
    from_iterable, from_each, from_range, repeat, empty, generate,
    EachyConfig, configure, get_config,
    EnumerableError, EmptyError, NotFoundError, ArgumentError, ComparisonError,
    IdentityError, ZipIndexError, SampleIndexError,
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Countdown(Enumerable[int]):
    def __init__(self, start):
        self.start = start

    def each(self, visit):
        for i in range(self.start, 0, -1):
            visit(i)


class Walker:
    """not an Enumerable, just something with each()"""

    def each(self, visit):
        visit(1)


# --- the abstract base ---

@test("Enumerable cannot be instantiated without each()")
def test_abstract():
    assert_raises(TypeError, Enumerable)
    assert_raises(TypeError, IEnumerable)


@test("a subclass that implements each() gets every derived operation")
def test_custom_subclass():
    countdown = Countdown(5)
    assert_that(countdown.select(lambda i: i % 2) == [5, 3, 1], "select")
    assert_that(countdown.sum() == 15, "sum")
    assert_that(countdown.first() == 5, "first")
    assert_that(countdown.max(2) == [5, 4], "max(2)")
    assert_that(countdown.chunks(lambda i: i > 2) == [(True, [5, 4, 3]), (False, [2, 1])], "chunks")


@test("python protocols route through each()")
def test_python_protocols():
    countdown = Countdown(3)
    assert_that(list(countdown) == [3, 2, 1], "iteration")
    assert_that(len(countdown) == 3, "len")
    assert_that(2 in countdown and 7 not in countdown, "membership")
    assert_that(bool(countdown) and not bool(Countdown(0)), "truthiness")
    assert_that(repr(countdown) == "Countdown()", f"repr: {countdown!r}")
    assert_that(repr(E([1])) == "IterableEnumerable([1])", f"repr: {E([1])!r}")


@test("anything with each() is Traversable")
def test_traversable_protocol():
    assert_that(isinstance(Countdown(1), Traversable), "enumerables are traversable")
    assert_that(isinstance(Walker(), Traversable), "so is a plain object with each()")
    assert_that(not isinstance([1, 2], Traversable), "lists are not")


# --- early exit ---

@test("short-circuiting stops the source traversal")
def test_short_circuit():
    visited = []

    def each(visit):
        for i in range(1, 100):
            visited.append(i)
            visit(i)

    assert_that(from_each(each).any(lambda i: i == 3), "found 3")
    assert_that(visited == [1, 2, 3], f"stopped at 3: {visited}")


@test("nested short-circuits do not end the outer traversal")
def test_nested_short_circuit():
    rows = E([[1, 2, 3], [4, 5], [6]])
    # every inner any() stops early, the outer count() still sees every row
    assert_that(rows.count(lambda row: E(row).any(lambda x: x > 0)) == 3, "all rows counted")
    assert_that(rows.find(lambda row: E(row).includes(5)) == [4, 5], "inner stop, outer stop")
    assert_that(rows.map(lambda row: E(row).first()) == [1, 4, 6], "inner first() per row")


@test("a source can ignore STOP in the raw visitor")
def test_stop_sentinel():
    seen = []
    Countdown(3).each(lambda i: seen.append(i) or STOP)
    assert_that(seen == [3, 2, 1], "each() itself does not interpret STOP")


@test("exceptions from a visitor propagate unchanged")
def test_visitor_exceptions():
    def boom(i):
        raise KeyError(i)

    assert_raises(KeyError, Countdown(2).any, boom)
    assert_raises(KeyError, Countdown(2).map, boom)


@test("early exit gets past a source that catches Exception")
def test_short_circuit_through_guarded_source():
    skipped = []

    def each(visit):
        for i in (1, 2, 3, 4):
            try:
                visit(i)
            except Exception:
                skipped.append(i)

    source = from_each(each)
    assert_that(source.find(lambda i: i % 2 == 0) == 2, "the first even element, not the last")
    assert_that(source.first(2) == [1, 2], "first(2)")
    assert_that(source.take_while(lambda i: i < 3) == [1, 2], "take_while")
    assert_that(skipped == [], f"the source never saw the stop signal: {skipped}")


# --- factories ---

@test("factory functions")
def test_factories():
    assert_that(from_iterable((1, 2)).to_a() == [1, 2], "from_iterable")
    assert_that(from_range(10, 3).to_a() == [10, 11, 12], "from_range")
    assert_that(repeat('a', 3).to_a() == ['a', 'a', 'a'], "repeat")
    assert_that(empty().to_a() == [] and empty().is_empty(), "empty")
    counter = iter(range(100))
    generated = generate(lambda: next(counter), 3)
    assert_that(generated.to_a() == [0, 1, 2], "generate")
    assert_that(generated.to_a() == [3, 4, 5], "generate calls the function again on each traversal")


@test("from_iterable over a generator is single pass")
def test_one_shot_generator():
    source = E(i for i in range(3))
    assert_that(source.to_a() == [0, 1, 2], "first traversal")
    assert_that(source.to_a() == [], "the generator is spent")


# --- errors ---

@test("every error is also the matching builtin exception")
def test_error_hierarchy():
    expected = {
        EmptyError: ValueError,
        NotFoundError: LookupError,
        ArgumentError: ValueError,
        ComparisonError: TypeError,
        IdentityError: TypeError,
        ZipIndexError: IndexError,
        SampleIndexError: IndexError,
    }
    for error_type, builtin in expected.items():
        error = error_type()
        assert_that(isinstance(error, EnumerableError), f"{error_type.__name__} is an EnumerableError")
        assert_that(isinstance(error, builtin), f"{error_type.__name__} is a {builtin.__name__}")
    assert_that(str(SampleIndexError()) == "can't sample empty collection", "default message")
    assert_that(str(EmptyError("custom")) == "custom", "explicit message")


# --- configuration ---

@test("config reads EACHY_* variables")
def test_config_from_env():
    config = EachyConfig.from_env({'EACHY_RANDOM_SEED': '7', 'EACHY_LOG_LEVEL': 'debug'})
    assert_that(config.random_seed == 7, f"seed: {config.random_seed}")
    assert_that(config.log_level == 'DEBUG', f"level: {config.log_level}")
    defaults = EachyConfig.from_env({})
    assert_that(defaults == EachyConfig(), "no variables gives the defaults")
    assert_raises(ValueError, EachyConfig.from_env, {'EACHY_RANDOM_SEED': 'seven'})


@test("configure patches the active config and the package log level")
def test_configure():
    previous = get_config()
    try:
        updated = configure(log_level='debug', random_seed=3)
        assert_that(get_config() is updated, "the new config is active")
        assert_that(updated.random_seed == 3, "seed patched")
        assert_that(logging.getLogger('eachy').level == logging.DEBUG, "package logger level applied")
        assert_that(updated.as_dict()['default_sum_type'] is int, "untouched fields kept")
    finally:
        configure(previous)


@test("configure rejects an unknown log level and keeps the old config")
def test_configure_bad_level():
    previous = get_config()
    assert_raises(ValueError, configure, log_level='LOUD')
    assert_that(get_config() is previous, "active config unchanged")


def _import_with_env(**env):
    """import eachy in a fresh interpreter with extra environment variables"""
    script = "import logging, eachy; print(eachy.get_config().log_level, logging.getLogger('eachy').level)"
    return subprocess.run([sys.executable, "-c", script], cwd=PROJECT_ROOT, env={**os.environ, **env},
                          capture_output=True, text=True)


@test("EACHY_LOG_LEVEL is applied to the package logger on import")
def test_env_level_applied_on_import():
    result = _import_with_env(EACHY_LOG_LEVEL='debug')
    assert_that(result.returncode == 0, f"import failed: {result.stderr}")
    assert_that(result.stdout.split() == ['DEBUG', str(logging.DEBUG)], f"got {result.stdout!r}")


@test("an unknown EACHY_LOG_LEVEL fails the import")
def test_env_bad_level_fails_import():
    result = _import_with_env(EACHY_LOG_LEVEL='LOUD')
    assert_that(result.returncode != 0, "import should fail")
    assert_that("unknown log level" in result.stderr, f"stderr: {result.stderr}")


# --- generated data ---

@test("seeded schema streams repeat on every traversal")
def test_dgen_stream():
    schema = {
        'name': 'first_name',
        'tier': {'_qen_provider': 'choice', 'from': ['free', 'pro']},
        'tags': [{'_qen_items': 'word', '_qen_count': 2}],
    }
    stream = from_schema(schema, seed=21).stream(5)
    first_pass = stream.to_a()
    assert_that(len(first_pass) == 5, "five records")
    assert_that(first_pass == stream.to_a(), "a seeded stream is re-traversable")
    assert_that(stream.all(lambda r: r['tier'] in ('free', 'pro')), "choice provider")
    assert_that(stream.all(lambda r: len(r['tags']) == 2), "fixed list count")


if __name__ == "__main__":
    suite.main(title="eachy core test suite")

"""Tests for bind parameter naming."""

from __future__ import annotations

import re
import threading

from qb_conditions.params import (
    BindContext,
    IdGenerator,
    SequentialIdGenerator,
    field_segment,
    uuid_id_generator,
)

# -- id generators -----------------------------------------------------------


def test_uuid_generator_is_bind_safe():
    value = uuid_id_generator()
    assert "-" not in value
    assert re.fullmatch(r"\w+", value)
    assert len(value) == 36


def test_uuid_generator_is_unique():
    assert uuid_id_generator() != uuid_id_generator()


def test_sequential_generator_counts_up():
    gen = SequentialIdGenerator()
    assert [gen(), gen(), gen()] == ["p1", "p2", "p3"]


def test_sequential_generator_prefix_and_start():
    gen = SequentialIdGenerator(prefix="q", start=10)
    assert gen() == "q10"
    assert gen() == "q11"


def test_sequential_generator_is_thread_safe():
    gen = SequentialIdGenerator()
    seen: list[str] = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            value = gen()
            with lock:
                seen.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 1600
    assert len(set(seen)) == 1600


def test_generators_satisfy_protocol():
    assert isinstance(SequentialIdGenerator(), IdGenerator)
    assert isinstance(uuid_id_generator, IdGenerator)


# -- field segment -----------------------------------------------------------


def test_field_segment_replaces_non_word_characters():
    assert field_segment("entity.age") == "entity_age"
    assert field_segment('"user"."first-name"') == "_user___first_name_"


def test_field_segment_defaults_when_missing():
    assert field_segment(None) == "field"
    assert field_segment("") == "field"
    assert field_segment("   ") == "field"


# -- BindContext -------------------------------------------------------------


def test_bind_context_names():
    ctx = BindContext.create("p7", "between", "entity.age")
    assert ctx.field_alias == "entity.age"
    assert ctx.parameter_name() == "p7_between_entity_age"
    assert ctx.parameter_name("start") == "p7_between_entity_age_start"


def test_bind_context_without_alias():
    ctx = BindContext.create("p1", "in", None)
    assert ctx.field_alias == ""
    assert ctx.parameter_name() == "p1_in_field"


def test_field_segment_ignores_non_string_aliases():
    assert field_segment(5) == "field"
    assert field_segment(["a"]) == "field"
    assert BindContext.create("p1", "equalTo", 5).field_alias == ""

"""
Tests for the read-through term resolver
"""

import asyncio

import pytest

from glossario.errors import GenerationFailed, StoreUnavailable, StoreWriteFailed, TermNotFound
from glossario.resolver import SOURCE_GENERATED, SOURCE_SEED, SOURCE_STORE, TermResolver
from glossario.schemas import DEFAULT_PRACTICAL_USAGE_TITLE
from glossario.seed_data import LOCAL_TERMS

from conftest import FakeGenerator, generated_payload, make_generated, make_store_mock


def stored_row(term_id: str, **content_overrides):
    content = generated_payload("Stored", id=term_id, **content_overrides)
    return {"id": term_id, "term": "Stored", "category": content["category"],
            "definition": content["definition"], "content": content}


@pytest.mark.asyncio
async def test_store_hit_wins_over_seed_and_generator():
    """A stored record is returned unchanged even when other tiers would answer"""
    store = make_store_mock({"api": stored_row("api", definition="Definição do banco.")})
    generator = FakeGenerator()
    resolver = TermResolver(store=store, generator=generator)

    resolution = await resolver.resolve_detailed("API")

    assert resolution.source == SOURCE_STORE
    assert resolution.record.definition == "Definição do banco."
    assert resolution.record != LOCAL_TERMS["api"]
    assert generator.calls == []
    store.get_term.assert_awaited_once_with("api")
    store.insert_term.assert_not_called()


@pytest.mark.asyncio
async def test_store_is_queried_by_normalized_id():
    store = make_store_mock({"react-js": stored_row("react-js")})
    resolver = TermResolver(store=store, generator=FakeGenerator())

    record = await resolver.resolve("  React JS ")

    store.get_term.assert_awaited_once_with("react-js")
    assert record.id == "react-js"


@pytest.mark.asyncio
async def test_unconfigured_store_falls_back_to_seed_without_generation():
    generator = FakeGenerator()
    resolver = TermResolver(store=None, generator=generator)

    resolution = await resolver.resolve_detailed("  API ")

    assert resolution.source == SOURCE_SEED
    assert resolution.record is LOCAL_TERMS["api"]
    assert resolution.write_back is None
    assert generator.calls == []


@pytest.mark.asyncio
async def test_store_errors_are_soft():
    """Transport failures on lookup fall through to the next tier"""
    store = make_store_mock()
    store.get_term.side_effect = StoreUnavailable("connection refused")
    resolver = TermResolver(store=store, generator=FakeGenerator())

    resolution = await resolver.resolve_detailed("API")

    assert resolution.source == SOURCE_SEED


@pytest.mark.asyncio
async def test_row_without_content_is_a_miss():
    store = make_store_mock({"kafka": {"id": "kafka", "term": "Kafka", "content": None}})
    generator = FakeGenerator()
    resolver = TermResolver(store=store, generator=generator)

    resolution = await resolver.resolve_detailed("Kafka")

    assert resolution.source == SOURCE_GENERATED
    assert generator.calls == ["Kafka"]
    await resolution.write_back


@pytest.mark.asyncio
async def test_invalid_stored_content_is_a_miss():
    store = make_store_mock({"kafka": {"id": "kafka", "content": {"term": "Kafka"}}})
    resolver = TermResolver(store=store, generator=FakeGenerator())

    resolution = await resolver.resolve_detailed("Kafka")

    assert resolution.source == SOURCE_GENERATED
    await resolution.write_back


@pytest.mark.asyncio
async def test_seed_tier_uses_raw_lowercase_key_not_slug():
    """Seed keys are matched on lower-cased text, so a slug-only match misses"""
    record = LOCAL_TERMS["api"].model_copy(update={"id": "ci-cd", "term": "CI/CD"})
    generator = FakeGenerator()
    resolver = TermResolver(store=None, generator=generator, local_terms={"ci/cd": record})

    hit = await resolver.resolve_detailed("CI/CD")
    miss = await resolver.resolve_detailed("ci-cd")

    assert hit.source == SOURCE_SEED
    assert miss.source == SOURCE_GENERATED
    assert generator.calls == ["ci-cd"]


@pytest.mark.asyncio
async def test_generated_id_is_forced_to_normalized_input():
    generator = FakeGenerator({"Zero Trust": make_generated("Zero Trust", id="ZT!!")})
    resolver = TermResolver(store=None, generator=generator)

    record = await resolver.resolve("Zero Trust")

    assert record.id == "zero-trust"


@pytest.mark.asyncio
async def test_generated_defaults_are_applied():
    payload_overrides = {"examples": None}
    generated = make_generated("Kanban", **payload_overrides).model_copy(update={"practical_usage": None})
    resolver = TermResolver(store=None, generator=FakeGenerator({"Kanban": generated}))

    record = await resolver.resolve("Kanban")

    assert record.examples == []
    assert record.practical_usage.title == DEFAULT_PRACTICAL_USAGE_TITLE


@pytest.mark.asyncio
async def test_generation_failure_is_surfaced():
    resolver = TermResolver(store=None, generator=FakeGenerator(fail_on=["Kafka"]))

    with pytest.raises(GenerationFailed):
        await resolver.resolve("Kafka")


@pytest.mark.asyncio
async def test_no_generator_means_not_found():
    resolver = TermResolver(store=make_store_mock(), generator=None)

    with pytest.raises(TermNotFound) as exc_info:
        await resolver.resolve("Kafka")
    assert str(exc_info.value) == "Termo não encontrado."


@pytest.mark.asyncio
async def test_blank_input_is_not_found_without_network():
    store = make_store_mock()
    generator = FakeGenerator()
    resolver = TermResolver(store=store, generator=generator)

    with pytest.raises(TermNotFound):
        await resolver.resolve("  /// ")
    store.get_term.assert_not_called()
    assert generator.calls == []


@pytest.mark.asyncio
async def test_write_back_inserts_generated_record():
    store = make_store_mock()
    resolver = TermResolver(store=store, generator=FakeGenerator())

    resolution = await resolver.resolve_detailed("Kafka")

    assert await resolution.write_back is True
    store.insert_term.assert_awaited_once_with(resolution.record)


@pytest.mark.asyncio
async def test_write_back_does_not_block_resolve():
    """resolve returns while the insert is still in flight"""
    release = asyncio.Event()
    store = make_store_mock()

    async def slow_insert(record):
        await release.wait()

    store.insert_term.side_effect = slow_insert
    resolver = TermResolver(store=store, generator=FakeGenerator())

    resolution = await resolver.resolve_detailed("Kafka")

    assert not resolution.write_back.done()
    assert resolver.pending_writes == 1
    release.set()
    assert await resolver.drain() == {"saved": 1, "failed": 0}
    assert resolver.pending_writes == 0


@pytest.mark.asyncio
async def test_write_back_failure_does_not_affect_result():
    store = make_store_mock()
    store.insert_term.side_effect = StoreWriteFailed("duplicate key")
    resolver = TermResolver(store=store, generator=FakeGenerator())

    resolution = await resolver.resolve_detailed("Kafka")

    assert resolution.record.id == "kafka"
    assert await resolution.write_back is False


@pytest.mark.asyncio
async def test_drain_with_nothing_pending():
    resolver = TermResolver()
    assert await resolver.drain() == {"saved": 0, "failed": 0}


@pytest.mark.asyncio
async def test_drain_counts_crashed_write_back_as_failed():
    """An unexpected insert error is collected by drain instead of escaping it"""
    release = asyncio.Event()
    store = make_store_mock()

    async def crashing_insert(record):
        await release.wait()
        raise RuntimeError("socket closed")

    store.insert_term.side_effect = crashing_insert
    resolver = TermResolver(store=store, generator=FakeGenerator())

    await resolver.resolve_detailed("Kafka")
    release.set()

    assert await resolver.drain() == {"saved": 0, "failed": 1}


@pytest.mark.asyncio
async def test_crashed_write_back_is_logged_when_it_finishes(caplog):
    store = make_store_mock()
    store.insert_term.side_effect = RuntimeError("socket closed")
    resolver = TermResolver(store=store, generator=FakeGenerator())

    resolution = await resolver.resolve_detailed("Kafka")
    with pytest.raises(RuntimeError):
        await resolution.write_back
    await asyncio.sleep(0)

    assert resolver.pending_writes == 0
    assert "Write-back crashed: RuntimeError: socket closed" in caplog.text

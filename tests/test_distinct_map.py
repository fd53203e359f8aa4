from searchcore.distinct_map import BufferedDistinctMap, DistinctMap


def test_easy_distinct_map():
    distinct = DistinctMap(2)
    buffered = BufferedDistinctMap(distinct)

    for x in [1, 1, 1, 2, 3, 4, 5, 6, 6, 6, 6, 6]:
        buffered.register(x)
    buffered.transfer_to_internal()
    assert len(distinct) == 8

    distinct = DistinctMap(2)
    buffered = BufferedDistinctMap(distinct)
    assert buffered.register(1) is True
    assert buffered.register(1) is True
    assert buffered.register(1) is False
    assert buffered.register(1) is False

    assert buffered.register(2) is True
    assert buffered.register(3) is True
    assert buffered.register(2) is True
    assert buffered.register(2) is False

    buffered.transfer_to_internal()
    assert len(distinct) == 5


def test_buffered_len_includes_pending_entries():
    distinct = DistinctMap(1)
    buffered = BufferedDistinctMap(distinct)
    buffered.register("a")
    buffered.register("b")
    assert len(buffered) == 2
    assert len(distinct) == 0
    buffered.transfer_to_internal()
    assert len(distinct) == 2
    assert len(buffered) == 2


def test_limit_spans_transfers():
    distinct = DistinctMap(2)
    first = BufferedDistinctMap(distinct)
    assert first.register("k") is True
    first.transfer_to_internal()

    second = BufferedDistinctMap(distinct)
    assert second.register("k") is True
    assert second.register("k") is False


def test_register_without_key_always_counts():
    distinct = DistinctMap(0)
    buffered = BufferedDistinctMap(distinct)
    assert buffered.register("x") is False
    assert buffered.register_without_key() is True
    assert buffered.register_without_key() is True
    buffered.transfer_to_internal()
    assert len(distinct) == 2
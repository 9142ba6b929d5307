from analytics.drawdown import compute_drawdown
from analytics.stats import compute_stats
from core.loader import RowBatch, load, load_batches


def _row(symbol, date, pnl="0", time="10:00:00", side="LONG"):
    return {"symbol": symbol, "entry_time": f"{date}T{time}", "position_type": side, "net_pnl": pnl}


def test_invalid_rows_are_dropped_and_counted():
    rows = [
        _row("A", "2025-01-01"),
        {"net_pnl": "500", "exit_reason": "EOD_EXIT", "entry_price": "10"},  # no symbol, side or date
        {"symbol": "B", "position_type": "LONG"},  # no date
    ]
    result = load_batches([("trades_a.csv", rows)])
    assert [t.symbol for t in result.trades] == ["A"]
    assert result.files[0].loaded == 1
    assert result.files[0].dropped == 2
    assert result.loaded_per_file() == {"trades_a.csv": 1}


def test_merge_is_newest_first():
    result = load(
        [
            ("a.csv", [_row("OLD", "2025-01-01")]),
            ("b.csv", [_row("NEW", "2025-01-02")]),
        ]
    )
    assert [t.date for t in result] == ["2025-01-02", "2025-01-01"]


def test_same_day_orders_by_entry_time_descending():
    rows = [_row("EARLY", "2025-01-01", time="09:15:00"), _row("LATE", "2025-01-01", time="15:10:00")]
    assert [t.symbol for t in load([("a.csv", rows)])] == ["LATE", "EARLY"]


def test_ties_keep_input_order():
    rows = [_row(s, "2025-01-01") for s in ("first", "second", "third")]
    other = [_row("fourth", "2025-01-01")]
    out = load([("a.csv", rows), ("b.csv", other)])
    assert [t.symbol for t in out] == ["first", "second", "third", "fourth"]
    # reproducible
    assert out == load([("a.csv", rows), ("b.csv", other)])


def test_failed_batch_is_skipped_without_aborting():
    batches = [
        RowBatch("broken.csv", [], error="permission denied"),
        RowBatch("good.csv", [_row("A", "2025-01-01")]),
    ]
    result = load_batches(batches)
    assert result.total == 1
    assert [s.filename for s in result.skipped] == ["broken.csv"]
    assert result.skipped[0].reason == "permission denied"
    assert [f.filename for f in result.files] == ["good.csv"]


def test_lazy_reader_failure_is_isolated():
    def exploding_rows():
        yield _row("A", "2025-01-01")
        raise OSError("disk went away")

    result = load_batches([("flaky.csv", exploding_rows()), ("ok.csv", [_row("B", "2025-01-03")])])
    assert [t.symbol for t in result.trades] == ["B"]
    assert result.skipped[0].filename == "flaky.csv"
    assert "disk went away" in result.skipped[0].reason


def test_valid_rows_with_unparseable_numbers_are_kept():
    rows = [
        {**_row("A", "2025-01-01", pnl="100"), "quantity": "1 lot"},
        {**_row("B", "2025-01-02", pnl="-40"), "exit_price": "N/A"},
        _row("C", "2025-01-03", pnl="3"),
    ]
    result = load_batches([("trades.csv", rows)])
    assert [t.symbol for t in result.trades] == ["C", "B", "A"]
    assert result.files[0].loaded == 3
    assert result.files[0].unparsed == 2
    assert result.files[0].dropped == 0
    assert result.trades[1].parse_errors == ("exit_price",)
    assert result.trades[1].net_pnl == -40


def test_unparseable_pnl_counts_as_zero_in_stats():
    rows = [_row("A", "2025-01-01", pnl="12..5"), _row("B", "2025-01-02", pnl="-3")]
    result = load_batches([("a.csv", rows)])
    assert result.total == 2
    assert result.files[0].unparsed == 1

    stats = compute_stats(result.trades)
    assert stats.total_pnl == -3
    assert (stats.winners, stats.losers, stats.breakeven) == (0, 1, 1)
    dd = compute_drawdown(result.trades)
    assert dd.max_drawdown == 3
    assert [p.equity for p in dd.drawdown_history] == [0, -3]


def test_empty_input():
    result = load_batches([])
    assert result.trades == []
    assert result.files == []
    assert result.skipped == []

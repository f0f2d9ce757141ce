from __future__ import annotations

import io

import pytest
from rich.console import Console

from lib_log_dispatch.adapters.line_sink import LineSink, default_line_writer, new_global_log, new_std_log
from lib_log_dispatch.domain.filters import FilteredTo, Unfiltered
from lib_log_dispatch.domain.levels import SeverityLevel


def test_unfiltered_sink_forwards_every_level_once(writer, any_level: SeverityLevel) -> None:
    sink = LineSink(writer)
    sink.dispatch(any_level, "a", 1)
    assert writer.calls == [(any_level, "a", 1)]


def test_sink_without_levels_is_unfiltered(writer) -> None:
    assert LineSink(writer).allowed == Unfiltered()


def test_whitelist_blocks_levels_outside_it(writer) -> None:
    sink = LineSink(writer, SeverityLevel.WARN, SeverityLevel.ERROR)
    sink.dispatch(SeverityLevel.INFO, "quiet")
    sink.dispatch(SeverityLevel.WARN, "loud")
    sink.dispatch(SeverityLevel.ERROR, "louder")
    assert writer.calls == [(SeverityLevel.WARN, "loud"), (SeverityLevel.ERROR, "louder")]


def test_whitelist_duplicates_collapse(writer) -> None:
    sink = LineSink(writer, SeverityLevel.ERROR, SeverityLevel.ERROR)
    assert sink.allowed == FilteredTo(frozenset({SeverityLevel.ERROR}))


def test_explicitly_empty_whitelist_forwards_nothing(writer, any_level: SeverityLevel) -> None:
    sink = LineSink.with_filter(writer, FilteredTo(frozenset()))
    sink.dispatch(any_level, "dropped")
    assert writer.calls == []


def test_with_filter_accepts_unfiltered(writer) -> None:
    sink = LineSink.with_filter(writer, Unfiltered())
    sink.dispatch(SeverityLevel.INFO, "kept")
    assert writer.calls == [(SeverityLevel.INFO, "kept")]


def test_suppressed_and_forwarded_calls_return_none(writer) -> None:
    sink = LineSink(writer, SeverityLevel.ERROR)
    assert sink.dispatch(SeverityLevel.INFO, "x") is None
    assert sink.dispatch(SeverityLevel.ERROR, "x") is None


def test_level_is_prefixed_and_values_keep_identity_and_order(writer) -> None:
    a, b, c = object(), ["list"], {"k": "v"}
    LineSink(writer).dispatch(SeverityLevel.INFO, a, b, c)
    (forwarded,) = writer.calls
    assert len(forwarded) == 4
    assert forwarded[0] is SeverityLevel.INFO
    assert forwarded[1] is a
    assert forwarded[2] is b
    assert forwarded[3] is c


def test_dispatch_without_values_forwards_only_level(writer) -> None:
    LineSink(writer).dispatch(SeverityLevel.WARN)
    assert writer.calls == [(SeverityLevel.WARN,)]


def test_repeated_calls_are_not_deduplicated(writer) -> None:
    sink = LineSink(writer)
    sink.dispatch(SeverityLevel.ERROR, "same")
    sink.dispatch(SeverityLevel.ERROR, "same")
    assert writer.calls == [(SeverityLevel.ERROR, "same"), (SeverityLevel.ERROR, "same")]


def test_disk_full_scenario(writer) -> None:
    sink = LineSink(writer, SeverityLevel.ERROR)
    sink.dispatch(SeverityLevel.WARN, "disk full")
    sink.dispatch(SeverityLevel.ERROR, "disk full")
    assert writer.calls == [(SeverityLevel.ERROR, "disk full")]


def test_unknown_level_is_forwarded_blindly(writer) -> None:
    LineSink(writer).dispatch("DEBUG", "raw")  # type: ignore[arg-type]
    assert writer.calls == [("DEBUG", "raw")]


def test_writer_failures_propagate() -> None:
    def _broken(*values) -> None:
        raise OSError("stream closed")

    with pytest.raises(OSError, match="stream closed"):
        LineSink(_broken).dispatch(SeverityLevel.ERROR, "x")


def test_emit_and_allowed_are_read_only(writer) -> None:
    sink = LineSink(writer)
    assert sink.emit is writer
    with pytest.raises(AttributeError):
        sink.allowed = FilteredTo(frozenset())  # type: ignore[misc]


def test_new_std_log_writes_level_first_lines() -> None:
    buffer = io.StringIO()
    sink = new_std_log(buffer, SeverityLevel.WARN)
    sink.dispatch(SeverityLevel.INFO, "skipped")
    sink.dispatch(SeverityLevel.WARN, "bucket", "missing", 404)
    assert buffer.getvalue() == "WARN bucket missing 404\n"


def test_new_std_log_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    new_std_log().dispatch(SeverityLevel.ERROR, "boom")
    captured = capsys.readouterr()
    assert captured.err == "ERR boom\n"
    assert captured.out == ""


def test_default_line_writer_prints_one_plain_line(record_console: Console) -> None:
    emit = default_line_writer(record_console)
    emit(SeverityLevel.INFO, "[bold]literal[/bold]", 3)
    assert record_console.export_text() == "INFO [bold]literal[/bold] 3\n"


def test_new_global_log_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    sink = new_global_log(SeverityLevel.ERROR)
    sink.dispatch(SeverityLevel.INFO, "hidden")
    sink.dispatch(SeverityLevel.ERROR, "shown")
    captured = capsys.readouterr()
    assert "ERR shown" in captured.err
    assert "hidden" not in captured.err
    assert captured.out == ""


@pytest.mark.parametrize("allowed", [{SeverityLevel.ERROR}, frozenset(), None])
def test_with_filter_rejects_non_filter_values(writer, allowed) -> None:
    with pytest.raises(TypeError, match="Unfiltered or FilteredTo"):
        LineSink.with_filter(writer, allowed)


def test_new_std_log_default_stream_with_whitelist(capsys: pytest.CaptureFixture[str]) -> None:
    sink = new_std_log(None, SeverityLevel.ERROR)
    sink.dispatch(SeverityLevel.WARN, "hidden")
    sink.dispatch(SeverityLevel.ERROR, "shown")
    assert capsys.readouterr().err == "ERR shown\n"

import pytest

from dok.output import Output, OutputCapture


def test_capture_restores_original_sinks(output: Output) -> None:
    original_info = output.info
    original_error = output.error

    capture = OutputCapture(output)
    capture.start()
    assert output.info is not original_info
    capture.stop()

    assert output.info is original_info
    assert output.error is original_error


def test_capture_collects_messages_in_order_and_still_prints(output: Output) -> None:
    capture = OutputCapture(output)
    capture.start()
    output.info("first")
    output.error("second")
    output.info("third")
    captured = capture.stop()

    assert captured == "first\nsecond\nthird"
    assert output.console.file.getvalue() == "first\nthird\n"
    assert output.error_console.file.getvalue() == "second\n"


def test_messages_after_stop_are_not_captured(output: Output) -> None:
    capture = OutputCapture(output)
    capture.start()
    output.info("inside")
    capture.stop()
    output.info("outside")
    assert capture.getvalue() == "inside"


def test_getvalue_reads_buffer_while_capturing(output: Output) -> None:
    capture = OutputCapture(output)
    capture.start()
    output.info("partial")
    assert capture.getvalue() == "partial"
    assert capture.is_capturing
    capture.stop()
    assert not capture.is_capturing


def test_stop_in_finally_restores_sinks_after_failure(output: Output) -> None:
    original_info = output.info
    capture = OutputCapture(output)
    with pytest.raises(RuntimeError):
        capture.start()
        try:
            output.info("before failure")
            raise RuntimeError("command failed")
        finally:
            captured = capture.stop()
    assert output.info is original_info
    assert captured == "before failure"


def test_write_raw_bypasses_sinks(output: Output) -> None:
    output.write_raw("\x1b]52;c;aGk=\x07")
    assert output.console.file.getvalue() == "\x1b]52;c;aGk=\x07"

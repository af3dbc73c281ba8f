import pytest

from resource_builder.pipelines.completion import CompletionDetector


class Recorder:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_fires_once_when_all_processed():
    fired = Recorder()
    detector = CompletionDetector(3, fired)

    assert detector.on_file_handled(True) is False
    assert detector.on_file_handled(True) is False
    assert detector.on_file_handled(True) is True
    assert detector.on_file_handled(True) is False

    assert fired.calls == 1
    assert detector.processed_count == 3
    assert detector.finalized


def test_discounted_skips_complete_the_run():
    fired = Recorder()
    detector = CompletionDetector(3, fired)

    detector.discount()
    assert detector.on_file_handled(False) is False
    detector.on_file_handled(True)
    detector.on_file_handled(True)

    assert fired.calls == 1
    assert detector.expected_count == 2
    assert detector.remaining == 0


def test_all_skipped():
    fired = Recorder()
    detector = CompletionDetector(2, fired)

    detector.discount()
    detector.on_file_handled(False)
    detector.discount()
    assert detector.on_file_handled(False) is True
    assert fired.calls == 1


def test_processed_never_exceeds_expected():
    detector = CompletionDetector(1, Recorder())
    detector.on_file_handled(True)
    detector.on_file_handled(True)
    detector.discount()

    assert detector.processed_count == 1
    assert detector.expected_count == 1


def test_negative_expected_rejected():
    with pytest.raises(ValueError):
        CompletionDetector(-1, Recorder())

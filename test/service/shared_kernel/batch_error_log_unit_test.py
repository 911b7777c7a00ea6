import pytest

from src.service.shared_kernel.app.dto.batch_error_log import BatchErrorLog


@pytest.mark.unit
class TestBatchErrorLog:
    def test_keeps_first_messages_and_counts_the_rest(self) -> None:
        log = BatchErrorLog(limit=2)

        for i in range(5):
            log.record(f'file{i}.svg', ValueError(f'bad {i}'))

        assert log.errors == ['file0.svg: bad 0', 'file1.svg: bad 1']
        assert log.suppressed_count == 3
        assert log.total_count == 5

    def test_empty_log_is_falsy(self) -> None:
        log = BatchErrorLog()
        assert not log
        log.record('row 1', 'missing title')
        assert log

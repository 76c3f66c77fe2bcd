"""
Unit tests for catchpoint status parsing.
"""

from algobox.commands.catchup.models import CatchupPhase
from algobox.commands.catchup.parser import extract, has_marker, normalize, read_sample

ACCOUNTS = CatchupPhase.ACCOUNT_PROCESSING
BLOCKS = CatchupPhase.BLOCK_DOWNLOAD

TOTAL = "Catchpoint total accounts"
PROCESSED = "Catchpoint accounts processed"
DOWNLOADED = "Catchpoint downloaded blocks"


class TestNormalize:
    def test_collapses_newlines_and_runs_of_spaces(self):
        assert normalize("a:  1\n\tb: 2\r\n") == "a: 1 b: 2"

    def test_empty_input(self):
        assert normalize("") == ""
        assert normalize(None) == ""


class TestExtract:
    def test_reads_account_counters(self, make_status):
        snapshot = make_status(total_accounts=500, accounts_processed=120)

        assert has_marker(snapshot, TOTAL)
        assert extract(snapshot, TOTAL, TOTAL) == 500
        assert extract(snapshot, TOTAL, PROCESSED) == 120

    def test_marker_absent_returns_none(self, make_status):
        snapshot = make_status()
        assert extract(snapshot, TOTAL, TOTAL) is None

    def test_zero_is_distinct_from_absent(self, make_status):
        snapshot = make_status(total_accounts=0)
        assert extract(snapshot, TOTAL, TOTAL) == 0

    def test_value_label_missing_returns_none(self, make_status):
        snapshot = make_status(total_accounts=500)
        assert extract(snapshot, TOTAL, PROCESSED) is None

    def test_non_numeric_value_returns_none(self):
        snapshot = "Catchpoint total accounts: pending\n"
        assert extract(snapshot, TOTAL, TOTAL) is None

    def test_first_run_of_digits_after_colon(self):
        snapshot = "Catchpoint downloaded blocks:   42 of 1000\n"
        assert extract(snapshot, DOWNLOADED, DOWNLOADED) == 42

    def test_value_split_across_lines(self):
        snapshot = "Catchpoint total accounts:\n   77\n"
        assert extract(snapshot, TOTAL, TOTAL) == 77

    def test_matching_is_case_sensitive(self):
        snapshot = "catchpoint total accounts: 10\n"
        assert not has_marker(snapshot, TOTAL)
        assert extract(snapshot, TOTAL, TOTAL) is None


class TestReadSample:
    def test_account_sample(self, make_status):
        snapshot = make_status(total_accounts=500, accounts_processed=120)
        sample = read_sample(snapshot, ACCOUNTS)

        assert sample.phase is ACCOUNTS
        assert sample.total == 500
        assert sample.processed == 120
        assert not sample.finished

    def test_block_sample(self, make_status):
        snapshot = make_status(total_blocks=1000, downloaded_blocks=1000)
        sample = read_sample(snapshot, BLOCKS)

        assert sample.total == 1000
        assert sample.processed == 1000
        assert sample.finished

    def test_account_phase_ignores_block_counters(self, make_status):
        snapshot = make_status(total_blocks=1000, downloaded_blocks=5)
        assert read_sample(snapshot, ACCOUNTS) is None

    def test_unparsable_counters_become_zero(self):
        sample = read_sample("Catchpoint total accounts: ?\n", ACCOUNTS)

        assert sample.total == 0
        assert sample.processed == 0
        assert not sample.total_known
        assert not sample.finished

    def test_processed_is_clamped_to_total(self, make_status):
        snapshot = make_status(total_accounts=10, accounts_processed=12)
        sample = read_sample(snapshot, ACCOUNTS)
        assert sample.processed == 10

"""Tests for the hit_count command line interface."""
import sys

import pytest
import hit_count
from hitcount_core.config import DAY_IN_MILLIS


class TestCliSuccess:
    """Test successful runs print the report to stdout."""

    def test_single_event(self, write_log, capsys):
        path = write_log('0|a.com')
        assert hit_count.main([str(path)]) == 0
        out, err = capsys.readouterr()
        assert out == '01/01/1970 GMT\na.com 1\n'
        assert err == ''

    def test_counts_descending(self, write_log, capsys):
        path = write_log('0|a.com', '0|a.com', '0|b.com')
        assert hit_count.main([str(path)]) == 0
        assert capsys.readouterr().out == '01/01/1970 GMT\na.com 2\nb.com 1\n'

    def test_two_days(self, write_log, capsys):
        path = write_log('0|a.com', f'{DAY_IN_MILLIS}|b.com')
        assert hit_count.main([str(path)]) == 0
        assert capsys.readouterr().out == (
            '01/01/1970 GMT\na.com 1\n'
            '01/02/1970 GMT\nb.com 1\n'
        )


class TestCliErrors:
    """Test failures exit non-zero with a readable message and no report."""

    def test_no_arguments(self, capsys):
        assert hit_count.main([]) == 1
        out, err = capsys.readouterr()
        assert out == ''
        assert 'ERROR: Input should be filename' in err
        assert 'usage:' in err

    def test_too_many_arguments(self, write_log, capsys):
        path = write_log('0|a.com')
        assert hit_count.main([str(path), str(path)]) == 1
        out, err = capsys.readouterr()
        assert out == ''
        assert 'got 2' in err

    def test_unknown_flag(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            hit_count.main(['--verbose'])
        assert excinfo.value.code != 0

    def test_missing_file(self, tmp_path, capsys):
        assert hit_count.main([str(tmp_path / 'missing.log')]) == 1
        out, err = capsys.readouterr()
        assert out == ''
        assert 'FileAccessError' in err
        assert 'missing.log' in err

    def test_malformed_line(self, write_log, capsys):
        """Test a bad line aborts the run and names the offending line."""
        path = write_log('0|a.com', 'abc', '0|b.com')
        assert hit_count.main([str(path)]) == 1
        out, err = capsys.readouterr()
        assert out == ''
        assert 'MalformedLineError' in err
        assert 'Offending line: abc' in err

    def test_malformed_timestamp(self, write_log, capsys):
        path = write_log('soon|a.com')
        assert hit_count.main([str(path)]) == 1
        out, err = capsys.readouterr()
        assert out == ''
        assert 'MalformedTimestampError' in err
        assert 'soon|a.com' in err

    def test_overlong_timestamp(self, write_log, capsys):
        """Test a huge digit run is reported like any other bad timestamp."""
        path = write_log('0|a.com', '1' * 5000 + '|a.com')
        assert hit_count.main([str(path)]) == 1
        out, err = capsys.readouterr()
        assert out == ''
        assert 'ERROR: MalformedTimestampError' in err
        assert '(line 2)' in err

    def test_closed_stdout(self, write_log, capsys, monkeypatch):
        """Test a reader closing the pipe early ends the run quietly."""
        class ClosedPipe:
            def write(self, text):
                raise BrokenPipeError(32, 'Broken pipe')

            def flush(self):
                pass

            def fileno(self):
                raise OSError('no file descriptor')

        path = write_log('0|a.com')
        monkeypatch.setattr(sys, 'stdout', ClosedPipe())
        assert hit_count.main([str(path)]) == 1
        assert capsys.readouterr().err == ''

    def test_error_after_valid_days_prints_nothing(self, write_log, capsys):
        """Test output is all-or-nothing when a later line is malformed."""
        path = write_log('0|a.com', f'{DAY_IN_MILLIS}|b.com', 'x|y|z')
        assert hit_count.main([str(path)]) == 1
        assert capsys.readouterr().out == ''


class TestBuildParser:
    """Test parser construction."""

    def test_parser_collects_paths(self):
        args = hit_count.build_parser().parse_args(['a.log'])
        assert args.paths == ['a.log']

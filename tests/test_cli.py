"""Tests for the CLI interface."""

import pytest

from gedsoundex.ui.cli import main, create_parser


def test_create_parser():
    """Test that the argument parser is created correctly."""
    parser = create_parser()

    assert parser is not None
    assert parser.prog == 'gedsoundex'


def test_cli_no_arguments(capsys):
    """Test CLI with no arguments shows help."""
    exit_code = main([])
    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'usage' in captured.out


def test_cli_encode_command(capsys):
    """Test the encode command."""
    exit_code = main(['encode', 'Auerbach', 'New York'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'Auerbach\t097500:097400' in captured.out
    assert 'New York\t670000:195000:679500' in captured.out


def test_cli_encode_russell(capsys):
    """Test the encode command with Russell soundex."""
    exit_code = main(['encode', '-a', 'std', 'Robert'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'Robert\tR163' in captured.out


def test_cli_compare_match(capsys):
    """Test the compare command with names that sound alike."""
    exit_code = main(['compare', 'Moskowitz', 'Moskovitz'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert captured.out.strip().endswith('MATCH')
    assert 'NO MATCH' not in captured.out


def test_cli_compare_no_match(capsys):
    """Test the compare command with names that sound different."""
    exit_code = main(['compare', '--algorithm', 'std', 'Smith', 'Jones'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'NO MATCH' in captured.out


def test_cli_match_command(capsys):
    """Test the match command."""
    exit_code = main(['match', 'Moskowitz', 'Smith', 'Moskovitz', 'Muskievicz'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'NAMES SOUNDING LIKE MOSKOWITZ' in captured.out
    assert '1. Moskovitz' in captured.out
    assert 'Smith' not in captured.out


def test_cli_match_nothing_found(capsys):
    """Test the match command when no name sounds alike."""
    exit_code = main(['match', 'Jones', 'Smith'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'No names sound like Jones' in captured.out


def test_cli_algorithms_command(capsys):
    """Test listing the algorithms."""
    exit_code = main(['algorithms'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'std\tRussell' in captured.out
    assert 'dm\tDaitch-Mokotoff' in captured.out


def test_cli_unknown_algorithm():
    """Test that an unknown algorithm is rejected."""
    with pytest.raises(SystemExit) as exc_info:
        main(['encode', '-a', 'metaphone', 'Robert'])

    assert exc_info.value.code == 2


@pytest.mark.parametrize("limit", ["0", "-3", "two"])
def test_cli_match_invalid_limit(limit):
    """Test that the match limit must be a positive number."""
    with pytest.raises(SystemExit) as exc_info:
        main(['match', '-n', limit, 'Moskowitz', 'Moskovitz'])

    assert exc_info.value.code == 2


def test_cli_version():
    """Test version flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(['--version'])

    assert exc_info.value.code == 0

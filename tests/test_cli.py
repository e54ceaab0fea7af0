"""
Tests for the command line interface
"""
import io
import pytest

from cli import build_parser, main, print_table


@pytest.fixture
def run(tmp_path, capsys):
    db_path = str(tmp_path / 'cli.sqlite3')

    def _run(*argv):
        code = main(['--db', db_path, *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


class TestParser:
    def test_parent_null(self):
        args = build_parser().parse_args(['tag', 'edit', '3', '-p', 'null'])
        assert args.parent_ids == [None]

    @pytest.mark.parametrize('value', ['nullify', 'NULL123'])
    def test_only_exact_null_detaches(self, value):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['tag', 'edit', '3', '-p', value])

    def test_null_is_case_insensitive(self):
        args = build_parser().parse_args(['tag', 'edit', '3', '-p', 'NULL'])
        assert args.parent_ids == [None]

    def test_parent_ids_repeat(self):
        args = build_parser().parse_args(['tag', 'add', 'x', '#000000', '-p', '1', '-p', '2'])
        assert args.parent_ids == [1, 2]

    def test_file_add_requires_existing_file(self, tmp_path):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['file', 'add', str(tmp_path / 'missing.txt')])


class TestPrintTable:
    def render(self, *args):
        out = io.StringIO()
        print_table(*args, out=out)
        return out.getvalue()

    def test_rows_and_headers(self):
        text = self.render('Tags', ['Id', 'Name'], [[1, 'music'], [10, 'a']])
        lines = text.splitlines()
        assert 'Tags' in lines[0]
        assert lines[1].startswith('╭')
        assert 'Id' in lines[2] and 'Name' in lines[2]
        assert any('1' in line and 'music' in line for line in lines)
        assert lines[-1].startswith('╰')

    def test_cells_are_not_markup(self):
        text = self.render('Tags', ['Name'], [['[red]alert[/red]']])
        assert '[red]alert[/red]' in text

    def test_empty(self):
        text = self.render('Files', ['Id', 'Path'], [])
        assert 'Id' in text and 'Path' in text


class TestCommands:
    def test_tag_lifecycle(self, run):
        assert run('tag', 'add', 'media', '#ff0000') == (0, 'Tag 1 created\n', '')
        assert run('tag', 'add', 'music', '#00ff00', '-p', '1')[0] == 0

        code, out, _ = run('tag', 'ls')
        assert code == 0
        assert '#FF0000' in out
        assert 'music' in out

        assert run('tag', 'edit', '2', '-p', 'null')[1] == 'Tag 2 updated\n'
        assert run('tag', 'order', '2', '1')[1] == 'Tags reordered\n'
        assert run('tag', 'rm', '1')[1] == 'Tag 1 deleted\n'

    def test_cycle_reports_error(self, run):
        run('tag', 'add', 'A', '#000000')
        run('tag', 'add', 'B', '#000000', '-p', '1')
        code, out, err = run('tag', 'edit', '1', '-p', '2')
        assert code == 1
        assert out == ''
        assert err.startswith('error: Circular reference')

    def test_invalid_color(self, run):
        code, _, err = run('tag', 'add', 'A', 'blue')
        assert code == 1
        assert "Invalid hex color: 'blue'" in err

    def test_file_commands(self, run, tmp_path):
        song = tmp_path / 'take5.mp3'
        song.write_text('x')
        run('tag', 'add', 'media', '#000000')
        run('tag', 'add', 'jazz', '#000000', '-p', '1')

        code, out, _ = run('file', 'add', str(song), '2')
        assert code == 0
        assert out.startswith('File 1 added')

        code, out, _ = run('file', 'ls', '--tags', '1')
        assert 'take5' in out
        assert 'jazz' in out

        assert run('file', 'edit', str(song))[1] == 'Tags added: 0, removed: 1\n'
        assert 'take5' not in run('file', 'ls', '--tags', '1')[1]

        assert run('file', 'rm', str(song))[0] == 0
        code, _, err = run('file', 'rm', str(song))
        assert code == 1
        assert 'does not exist' in err

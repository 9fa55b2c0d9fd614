import io
import os
import struct
from pathlib import Path

from drillbox import shell
from drillbox.shell import Shell, main, parse_input

SED_LINE = 'mysed s/unix/linux/ "unix is opensource. unix is free os."'


def make_shell(tmp_path, **kwargs):
    out, err = io.StringIO(), io.StringIO()
    kwargs.setdefault("dictionary_paths", [tmp_path / "dict.txt"])
    return Shell(out=out, err=err, **kwargs), out, err


def elf_bytes(e_type):
    ident = b"\x7fELF" + bytes([2, 1, 1]) + bytes(9)
    header = ident + struct.pack("<H", e_type)
    return header + bytes(64 - len(header))


def test_parse_input_quotes_group_words():
    assert parse_input(SED_LINE) == ["mysed", "s/unix/linux/", "unix is opensource. unix is free os."]


def test_parse_input_blanks_and_empty_quotes():
    assert parse_input("  a\t b  ") == ["a", "b"]
    assert parse_input('""') == []
    assert parse_input('ab"c d"e') == ["abc de"]


def test_parse_input_limits_argument_count():
    line = " ".join(str(n) for n in range(100))
    assert len(parse_input(line)) == shell.MAX_ARGS - 1


def test_mysed_replaces_first(tmp_path):
    sh, out, _ = make_shell(tmp_path)
    assert sh.run_line(SED_LINE) is True
    lines = out.getvalue().splitlines()
    assert "linux is opensource. unix is free os." in lines
    assert "rules: s/unix/linux/" in lines


def test_mysed_bad_rule(tmp_path):
    sh, _, err = make_shell(tmp_path)
    sh.run_line("mysed x/a/b/ text")
    assert "Invalid replace command format" in err.getvalue()


def test_mysed_missing_text(tmp_path):
    sh, _, err = make_shell(tmp_path)
    sh.run_line("mysed s/a/b/")
    assert "Error: NULL rules or str parameter" in err.getvalue()


def test_mywc_counts(tmp_path):
    text = tmp_path / "text.txt"
    text.write_text("and " * 11 + "The " * 10 + "skilled " + "just " * 3)
    sh, out, _ = make_shell(tmp_path)
    sh.run_line(f"mywc {text}")
    output = out.getvalue()
    for expected in ("and                  11", "the                  10", "skilled              1", "just                 3"):
        assert expected in output


def test_mywc_missing_file(tmp_path):
    sh, _, err = make_shell(tmp_path)
    sh.run_line(f"mywc {tmp_path / 'absent.txt'}")
    assert "Error opening file" in err.getvalue()


def test_mytrans_translates(tmp_path):
    (tmp_path / "dict.txt").write_text(
        "#code\nTrans:n. 码;密码;法规;法典@vt. 把...编码;制成法典@n. 代码\n"
        "#to\nTrans:prep. 到;向;趋于@ad. 向前\n"
        "#be\nTrans:prep. 是;有;在\n"
        "#in\nTrans:prep. 在;在...之内;从事于;按照;穿着@ad. 进入;朝里;在家@a. 在里面的;执政的@n. 执政者;入口\n",
        encoding="utf-8",
    )
    text = tmp_path / "text.txt"
    text.write_text("Code empowers individuals to be creators in\n", encoding="utf-8")
    sh, out, _ = make_shell(tmp_path)
    sh.run_line(f"mytrans {text}")
    output = out.getvalue()
    assert "原文: code\t翻译: n. 码;密码;法规;法典@vt. 把...编码;制成法典@n. 代码" in output
    assert "原文: empowers\t未找到该单词的翻译。" in output
    assert "原文: individuals\t未找到该单词的翻译。" in output
    assert "原文: to\t翻译: prep. 到;向;趋于@ad. 向前" in output
    assert "原文: be\t翻译: prep. 是;有;在" in output
    assert "原文: creators\t未找到该单词的翻译。" in output
    assert "原文: in\t翻译: prep. 在;在...之内;从事于;按照;穿着@ad. 进入;朝里;在家@a. 在里面的;执政的@n. 执政者;入口" in output
    assert "词典加载完成，共计4词条。" in output


def test_mytrans_without_dictionary(tmp_path):
    sh, _, err = make_shell(tmp_path)
    sh.run_line("mytrans whatever.txt")
    assert "加载词典失败，请确保 dict.txt 存在。" in err.getvalue()


def test_myfile_reports_types(tmp_path):
    dyn = tmp_path / "dyn.bin"
    rel = tmp_path / "rel.o"
    dyn.write_bytes(elf_bytes(3))
    rel.write_bytes(elf_bytes(1))
    sh, out, _ = make_shell(tmp_path)
    sh.run_line(f"myfile {dyn}")
    sh.run_line(f"myfile {rel}")
    output = out.getvalue()
    assert "ELF Type: Shared Object/PIE (ET_DYN) (0x3)" in output
    assert "ELF Type: Relocatable (ET_REL) (0x1)" in output
    assert f"filepath: {dyn}" in output


def test_myfile_not_elf(tmp_path):
    plain = tmp_path / "plain.bin"
    plain.write_bytes(bytes(64))
    sh, out, _ = make_shell(tmp_path)
    sh.run_line(f"myfile {plain}")
    assert "ELF Type: Unknown (ET_NONE) (0x0)" in out.getvalue()


def test_myfile_missing(tmp_path):
    sh, _, err = make_shell(tmp_path)
    sh.run_line(f"myfile {tmp_path / 'absent'}")
    assert err.getvalue().startswith("open:")


def test_unknown_command(tmp_path):
    sh, _, err = make_shell(tmp_path)
    assert sh.run_line("nosuch arg") is True
    assert "mybash: command not found: nosuch" in err.getvalue()


def test_cd_changes_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub").mkdir()
    sh, _, _ = make_shell(tmp_path)
    sh.run_line("cd sub")
    assert Path.cwd().resolve() == (tmp_path / "sub").resolve()


def test_cd_without_argument(tmp_path):
    sh, _, err = make_shell(tmp_path)
    sh.run_line("cd")
    assert 'mybash: expected argument to "cd"' in err.getvalue()


def test_exit_stops(tmp_path):
    sh, _, _ = make_shell(tmp_path)
    assert sh.run_line("exit") is False


def test_run_script_traces_and_stops_at_exit(tmp_path):
    script = tmp_path / "script.sh"
    script.write_text(f"{SED_LINE}\n\nmysed s/a/b/ first\nexit\nmysed s/x/y/ never\n")
    sh, out, _ = make_shell(tmp_path)
    assert sh.run_script(script) == 0
    output = out.getvalue()
    assert f"mybash: reading commands from file '{script}'" in output
    assert "cmd_name: mysed" in output
    assert "cmd_arg2: unix is opensource. unix is free os." in output
    assert "linux is opensource. unix is free os." in output
    assert "never" not in output
    assert sh.trace is False


def test_run_script_null_argument_trace(tmp_path):
    script = tmp_path / "script.sh"
    script.write_text("nosuch\n")
    sh, out, _ = make_shell(tmp_path)
    sh.run_script(script)
    assert "cmd_arg1: (null)" in out.getvalue()


def test_run_script_missing(tmp_path):
    sh, out, _ = make_shell(tmp_path)
    missing = tmp_path / "none.sh"
    assert sh.run_script(missing) == 1
    assert f"mybash: cannot open file: {missing}" in out.getvalue()


def test_interactive(tmp_path):
    sh, out, _ = make_shell(tmp_path)
    assert sh.interactive(io.StringIO("mysed s/a/b/ aaa\n")) == 0
    output = out.getvalue()
    assert output.startswith("mybash$ ")
    assert "baa" in output.splitlines()
    assert "cmd_name" not in output


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "script.sh"
    script.write_text(SED_LINE + "\n")
    assert main([os.fspath(script)]) == 0
    assert "linux is opensource. unix is free os." in capsys.readouterr().out
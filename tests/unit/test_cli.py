from ppc_rlw_asm.cli import main, process_text
from ppc_rlw_asm.writers import to_asm_lines

def test_default_prints_line_and_description(capsys):
    rc = main(["-e", "rlwinm r0,r7,0x10,0x0,0xf"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "rlwinm r0,r7,16,0,15" in out
    assert "r0 = (r7 << 16) & MASK(0..15)" in out

def test_canonical_and_output_file(tmp_path, capsys):
    src = tmp_path / "rot.s"
    src.write_text("slwi r3,r4,5  # shift\nrotlw r1,r2,r3\n", encoding="utf-8")
    out = tmp_path / "canon.s"
    rc = main([str(src), "--canonical", "-o", str(out)])
    assert rc == 0
    text = capsys.readouterr().out
    assert "  rlwinm r3,r4,5,0,26" in text
    assert "  rlwnm r1,r2,r3,0,31" in text
    assert out.read_text(encoding="utf-8").splitlines() == ["rlwinm r3,r4,5,0,26", "rlwnm r1,r2,r3,0,31"]

def test_highlevel_on_rlwnm_is_a_note(capsys):
    rc = main(["-e", "rotlw r1,r2,r3", "--highlevel"])
    err = capsys.readouterr().err
    assert rc == 0
    assert "NOTA: Sin descripción para 'rlwnm'" in err

def test_errors_exit_1(capsys):
    rc = main(["-e", "bogus r0,r1"])
    assert rc == 1
    assert "Mnemónico no reconocido" in capsys.readouterr().err

def test_strict_warnings(capsys):
    assert main(["-e", "slwi r3,r4,40"]) == 0
    assert main(["-e", "slwi r3,r4,40", "--strict"]) == 1
    assert main(["-e", "slwi r3,r4,40", "--strict", "--no-range-check"]) == 0

def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.s")]) == 2

def test_process_text():
    instructions, canon, diags = process_text("extrwi r1,r2,8,4\ninsrwi r1,r2,8,4\n")
    assert not diags
    assert to_asm_lines(canon) == ["rlwinm r1,r2,12,24,31", "rlwinm r1,r2,20,4,11"]
    assert to_asm_lines(instructions) == ["extrwi r1,r2,8,4", "insrwi r1,r2,8,4"]

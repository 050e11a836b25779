from catalog_join import cli
from catalog_join import rules

PRIMARY = (
    "key,0,1,2,3,4,5,6,7,8,9,10,11,12,13,14,15\n"
    "#,Singular,,,,,,,,,,,,,,,ItemUICategory\n"
    '10,"木椅, 大",,,,,,,,,,,,,,,57\n'
    "11,石头,,,,,,,,,,,,,,,99\n"
    "12,金鱼,,,,,,,,,,,,,,,47\n"
)
SECONDARY = (
    "key,0\n"
    "#,Singular\n"
    "10,wooden chair\n"
)


def write_inputs(tmp_path):
    (tmp_path / rules.ITEM_CN_FILE).write_text(PRIMARY, encoding="utf-8")
    (tmp_path / rules.ITEM_EN_FILE).write_text(SECONDARY, encoding="utf-8")


def test_run_writes_output(tmp_path):
    write_inputs(tmp_path)
    assert cli.main(["--workdir", str(tmp_path)]) == 0

    out = (tmp_path / rules.OUTPUT_FILE).read_text(encoding="utf-8")
    assert out == (
        "ItemID,ChineseName,EnglishName,ItemType\n"
        '10,"木椅, 大",wooden chair,椅子 (Seating)\n'
        "12,金鱼,N/A,鱼类 (Fish)"
    )

def test_missing_input_fails_without_output(tmp_path):
    (tmp_path / rules.ITEM_CN_FILE).write_text(PRIMARY, encoding="utf-8")
    assert cli.main(["--workdir", str(tmp_path)]) == 1
    assert not (tmp_path / rules.OUTPUT_FILE).exists()

def test_unwritable_output_fails(tmp_path):
    write_inputs(tmp_path)
    assert cli.main(["--workdir", str(tmp_path), "--output", "missing-dir/out.csv"]) == 1

def test_custom_file_names(tmp_path):
    (tmp_path / "cn.csv").write_text(PRIMARY, encoding="utf-8")
    (tmp_path / "en.csv").write_text(SECONDARY, encoding="utf-8")
    code = cli.main(["--workdir", str(tmp_path), "--primary", "cn.csv", "--secondary", "en.csv", "--output", "o.csv"])
    assert code == 0
    assert (tmp_path / "o.csv").read_text(encoding="utf-8").count("\n") == 2

def test_undecodable_input_fails_without_output(tmp_path):
    (tmp_path / rules.ITEM_CN_FILE).write_bytes(bytes(range(256)) * 4)
    (tmp_path / rules.ITEM_EN_FILE).write_text(SECONDARY, encoding="utf-8")
    assert cli.main(["--workdir", str(tmp_path)]) == 1
    assert not (tmp_path / rules.OUTPUT_FILE).exists()

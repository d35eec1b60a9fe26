"""Tests for generating pytest modules."""

from xmldoctest.documentation import parse_documentation
from xmldoctest.generator import HEADER, check_class_name, generate_for_file, generate_test_module

from .fixtures import FAILING_XML, PASSING_XML, make_record


def test_generated_module_compiles():
    result = generate_test_module(parse_documentation(PASSING_XML))
    assert result.ok
    assert result.source.startswith(HEADER)
    compile(result.source, "test_generated.py", "exec")
    assert "class TestDocs:" in result.source
    for method_name in ("test_A_test_for_the_doctest", "test_Demo___0", "test_Demo___1", "test_No_output"):
        assert f"    def {method_name}(self):" in result.source
    assert "'A test for the doctest'" in result.source


def test_generated_method_layout():
    record = make_record("T:X", ("Hello", [('print("Hello world")\n# Output:\n# Hello world\n', True)]))
    source = generate_test_module([record], usings=["json"]).source
    assert "\nimport json\n" in source
    assert (
        "    def test_Hello(self):\n"
        "        'Hello'\n"
        "        code = (\n"
        "            'print(\"Hello world\")\\n'\n"
        "            '# Output:\\n'\n"
        "            '# Hello world'\n"
        "        )\n"
        "        with ConsoleRedirector() as redirector:\n"
        "            ExecutionContext(code, filename='<doctest Hello>').run(dict(globals()))\n"
        "\n"
        '        assert redirector.captured_err == ""\n'
        "        assert comparable_lines(split_lines(redirector.captured_out)) == [\n"
        "            'Hello world',\n"
        "        ]\n"
    ) in source


def test_single_line_example_is_one_literal():
    record = make_record("T:X", ("Quiet", [("value = 1", True)]))
    assert "        code = 'value = 1'\n" in generate_test_module([record]).source


def test_generated_module_runs_under_pytest(pytester):
    pytester.makepyfile(test_generated=generate_test_module(parse_documentation(PASSING_XML)).source)
    result = pytester.runpytest("-p", "no:cacheprovider")
    result.assert_outcomes(passed=4)


def test_generated_module_reports_failures(pytester):
    pytester.makepyfile(test_generated=generate_test_module(parse_documentation(FAILING_XML)).source)
    result = pytester.runpytest("-p", "no:cacheprovider")
    result.assert_outcomes(passed=1, failed=3)


def test_multiline_string_literal_keeps_its_lines(pytester):
    code = 'print("""a\nb""")\n# Output:\n# a\n# b\n'
    result = generate_test_module([make_record("T:X", ("Literal", [(code, True)]))])
    assert result.ok
    pytester.makepyfile(test_generated=result.source)
    pytester.runpytest("-p", "no:cacheprovider").assert_outcomes(passed=1)


def test_star_import_runs_at_module_level(pytester):
    code = "from os.path import *\nprint(basename('/a/b'))\n# Output:\n# b\n"
    result = generate_test_module([make_record("T:X", ("Star", [(code, True)]))])
    assert result.diagnostics == []
    pytester.makepyfile(test_generated=result.source)
    pytester.runpytest("-p", "no:cacheprovider").assert_outcomes(passed=1)


def test_code_on_the_tag_line_runs_under_pytest(pytester):
    code = "print(1)\n            print(2)\n            # Output:\n            # 1\n            # 2\n            "
    result = generate_test_module([make_record("T:X", ("Same line", [(code, True)]))])
    assert result.ok
    pytester.makepyfile(test_generated=result.source)
    pytester.runpytest("-p", "no:cacheprovider").assert_outcomes(passed=1)


def test_async_example_runs_under_pytest(pytester):
    code = "import asyncio\nawait asyncio.sleep(0)\nprint('x')\n# Output:\n# x\n"
    pytester.makepyfile(test_generated=generate_test_module([make_record("T:X", ("Async", [(code, True)]))]).source)
    pytester.runpytest("-p", "no:cacheprovider").assert_outcomes(passed=1)


def test_comment_only_example_compiles():
    record = make_record("T:X", ("Comments", [("# nothing to run\n", True)]), ("Empty", [("", True)]))
    compile(generate_test_module([record]).source, "test_generated.py", "exec")


def test_colliding_method_names_are_numbered():
    record = make_record("T:X", ("a b", [("pass", True)]), ("a_b", [("pass", True)]))
    source = generate_test_module([record]).source
    assert "def test_a_b(self):" in source
    assert "def test_a_b_2(self):" in source


def test_example_with_syntax_error_is_reported():
    record = make_record("T:X", ("Broken", [("def broken(:", True)]), ("Fine", [("pass", True)]))
    result = generate_test_module([record])
    assert [diagnostic.id for diagnostic in result.diagnostics] == ["DOCTEST0004"]
    assert "def test_Fine(self):" in result.source
    assert "test_Broken" not in result.source


def test_no_examples_still_generates_a_class():
    source = generate_test_module([]).source
    assert "class TestDocs:\n    pass\n" in source
    compile(source, "test_generated.py", "exec")


def test_class_name_diagnostics():
    assert check_class_name("TestDocs") == []
    assert [diagnostic.id for diagnostic in check_class_name("Docs")] == ["DOCTEST0003"]
    assert [diagnostic.id for diagnostic in check_class_name("Test Docs")] == ["DOCTEST0002"]
    assert [diagnostic.id for diagnostic in check_class_name("class")] == ["DOCTEST0002"]
    result = generate_test_module(parse_documentation(PASSING_XML), class_name="Docs")
    assert result.source is None
    assert not result.ok


def test_missing_documentation_file(tmp_path):
    result = generate_for_file(tmp_path / "Demo.xml")
    assert result.source is None
    assert [diagnostic.id for diagnostic in result.diagnostics] == ["DOCTEST0001"]
    assert str(result.diagnostics[0]).startswith("DOCTEST0001: Missing XML documentation file.")


def test_generate_for_file(tmp_path):
    path = tmp_path / "Demo.xml"
    path.write_text(PASSING_XML, encoding="utf-8")
    result = generate_for_file(path, class_name="TestDemo")
    assert result.ok
    assert "class TestDemo:" in result.source

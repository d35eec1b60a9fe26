"""Shared XML documentation fixtures."""

from xmldoctest.documentation import CodeBlock, DocumentationRecord, ExampleSection

PASSING_XML = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>Demo</name>
    </assembly>
    <members>
        <member name="T:Demo.Greeter">
            <summary>Greets people.</summary>
            <example name="A test for the doctest">
            <code doctest="true">
            print("Hello world")
            # Output:
            # Hello world
            </code>
            </example>
        </member>
        <member name="M:Demo.Greeter.Add">
            <example name="Demo">
            <code doctest="true">
            print(1 + 2)
            # Output:
            # 3
            </code>
            <code>this is not python</code>
            <code doctest="true">
            total = sum([1, 2, 3])
            print(total)
            print()
            print("a > b")
            # Output:
            # 6
            #
            # a > b
            </code>
            </example>
        </member>
        <member name="P:Demo.Greeter.Name">
            <summary>The name.</summary>
        </member>
        <member name="T:Demo.Silent">
            <example name="No output">
            <code doctest="true">
            x = 1
            </code>
            </example>
        </member>
    </members>
</doc>
"""

PASSING_NAMES = [
    "A test for the doctest",
    "Demo > 0",
    "Demo > 1",
    "No output",
]

FAILING_XML = """<?xml version="1.0"?>
<doc>
    <members>
        <member name="T:Demo.Broken">
            <example name="Wrong output">
            <code doctest="true">
            print("goodbye")
            # Output:
            # hello
            </code>
            </example>
            <example name="Writes to stderr">
            <code doctest="true">
            import sys
            print("hi")
            sys.stderr.write("oops")
            # Output:
            # hi
            </code>
            </example>
            <example name="Raises">
            <code doctest="true">
            raise ValueError("boom")
            </code>
            </example>
            <example name="Passes">
            <code doctest="true">
            print("ok")
            # Output:
            # ok
            </code>
            </example>
        </member>
    </members>
</doc>
"""

USES_JSON_XML = """<doc><members><member name="T:Json">
<example name="Uses json">
<code doctest="true">
print(json.dumps({"a": 1}))
# Output:
# {"a": 1}
</code>
</example>
</member></members></doc>
"""

NOT_DOCUMENTATION_XML = """<?xml version="1.0"?>
<project><name>Demo</name></project>
"""


def make_record(name: str, *sections: tuple[str | None, list[tuple[str, bool]]]) -> DocumentationRecord:
    """Build a documentation record from (section name, [(code, doctest), ...]) tuples."""
    examples = [
        ExampleSection(name=section_name, code_blocks=[CodeBlock(text=text, doctest=flag) for text, flag in blocks])
        for section_name, blocks in sections
    ]
    return DocumentationRecord(name=name, examples=examples)

#!/usr/bin/env python3
"""Example usage of the xmldoctest library."""

from xmldoctest import (
    DocTestException,
    ExecutionContext,
    collect_doctests,
    extract_examples,
    parse_documentation,
    parse_expected,
    run_doctests,
)

DOCUMENTATION = """<?xml version="1.0"?>
<doc>
    <members>
        <member name="M:Demo.Greet">
            <example name="Greeting">
            <code doctest="true">
            print(greet("world"))
            # Output:
            # Hello, world!
            </code>
            </example>
            <example name="Shouting">
            <code doctest="true">
            print(greet("world").upper())
            # Output:
            # HELLO, WORLD!
            </code>
            <code doctest="true">
            print(greet("you"))
            # Output:
            # Hello, me!
            </code>
            </example>
        </member>
    </members>
</doc>
"""

PREAMBLE = """
def greet(name):
    return f"Hello, {name}!"
"""


def main():
    print("xmldoctest Demo")
    print("=" * 15)

    print("\n1. Expected Output:")
    parsed = parse_expected('print("hi")\n# Output:\n# hi\n')
    print(f"Exercised code: {parsed.code!r}")
    print(f"Expected lines: {parsed.expected!r}")

    print("\n2. Extraction:")
    records = parse_documentation(DOCUMENTATION)
    for example in extract_examples(records):
        print(f"Found example: {example.name}")

    print("\n3. Running:")
    try:
        outcomes = run_doctests(collect_doctests(records, ExecutionContext.root(PREAMBLE)))
    except DocTestException as e:
        print(f"Could not run examples: {e}")
        return
    for outcome in outcomes:
        print(f"{outcome.status}: {outcome.name}")
        if outcome.expected is not None:
            # The last example is wrong on purpose.
            print(f"  expected {outcome.expected!r}, got {outcome.actual!r}")

    print("\nDemo completed!")


if __name__ == "__main__":
    main()

"""Tests for inspectors/control_keyword.py."""

from prettiest.application.fixes import apply_fixes
from prettiest.application.inspectors.control_keyword import (
    CONTROL_STATEMENTS_OWN_LINE_MESSAGE,
    ControlKeywordInspector,
    preceding_body,
)
from prettiest.application.positions import PositionService
from prettiest.domain.model.configuration import RuleConfig
from prettiest.domain.model.enums import ViolationKind
from prettiest.domain.model.fix import Fix
from prettiest.domain.model.node_kind import NodeKind
from prettiest.domain.model.position import LineAndCharacter
from prettiest.domain.model.source_file import SourceFile
from prettiest.domain.model.violation import Violation
from tests.factories import block, find_first, function, if_, node, parse, tok, try_


def _inspector(source: SourceFile, config: RuleConfig | None = None) -> ControlKeywordInspector:
    config = config or RuleConfig()
    return ControlKeywordInspector(source.text, PositionService(source.text, config), config)


def _inspect_try(source: SourceFile, config: RuleConfig | None = None) -> tuple[Violation, ...]:
    statement = find_first(source.root, NodeKind.TRY_STATEMENT)
    return _inspector(source, config).inspect_try_statement(statement)


def _inspect_if(source: SourceFile, config: RuleConfig | None = None) -> tuple[Violation, ...]:
    statement = find_first(source.root, NodeKind.IF_STATEMENT)
    return _inspector(source, config).inspect_if_statement(statement)


def _fixed(source: SourceFile, violations: tuple[Violation, ...]) -> str:
    return apply_fixes(source.text, [v.fix for v in violations if v.fix is not None])


class TestPrecedingBody:
    """Tests for preceding_body."""

    def test_catch_follows_try_block(self) -> None:
        """Catch clause is preceded by the try block."""
        source = parse("try {} catch (e) {}", try_(block(), catch=block()))
        statement = source.root.children[0]

        previous = preceding_body(statement, statement.children[2])

        assert previous is statement.children[1]
        assert previous.kind is NodeKind.BLOCK

    def test_finally_follows_catch_clause(self) -> None:
        """Finally keyword is preceded by the catch clause, not its block."""
        source = parse("try {} catch (e) {} finally {}", try_(block(), catch=block(), finally_=block()))
        statement = source.root.children[0]
        keyword = statement.first_child(NodeKind.FINALLY_KEYWORD)
        assert keyword is not None

        previous = preceding_body(statement, keyword)

        assert previous is not None
        assert previous.kind is NodeKind.CATCH_CLAUSE

    def test_none_without_body(self) -> None:
        """No block before target yields None."""
        source = parse("finally {}", node(NodeKind.TRY_STATEMENT, tok("finally", NodeKind.FINALLY_KEYWORD), block()))
        statement = source.root.children[0]

        assert preceding_body(statement, statement.children[0]) is None


class TestTryStatement:
    """Tests for catch/finally placement."""

    def test_catch_on_closing_brace_line(self) -> None:
        """'} catch' is reported with a line-break fix."""
        text = "try {\n    foo();\n} catch (e) {\n    bar();\n}\n"
        source = parse(text, try_(block("foo();"), catch=block("bar();")))

        violations = _inspect_try(source)

        assert len(violations) == 1
        violation = violations[0]
        assert violation.kind is ViolationKind.CONTROL_STATEMENT_OWN_LINE
        assert violation.message == CONTROL_STATEMENTS_OWN_LINE_MESSAGE
        assert violation.node.kind is NodeKind.CATCH_CLAUSE
        assert violation.start == LineAndCharacter(2, 2)
        assert violation.fix == Fix(start_offset=18, remove_width=1, insert_text="\n")
        assert _fixed(source, violations) == "try {\n    foo();\n}\ncatch (e) {\n    bar();\n}\n"

    def test_catch_on_own_line(self) -> None:
        """Catch already on its own line is accepted."""
        text = "try {\n    foo();\n}\ncatch (e) { bar(); }\n"
        source = parse(text, try_(block("foo();"), catch=block("bar();")))

        assert _inspect_try(source) == ()

    def test_single_line_try(self) -> None:
        """Whole statement on one line: catch moves to a new line."""
        text = "try { foo(); } catch (e) { bar(); }"
        source = parse(text, try_(block("foo();"), catch=block("bar();")))

        violations = _inspect_try(source)

        assert len(violations) == 1
        fix = violations[0].fix
        assert fix is not None
        assert (fix.start_offset, fix.remove_width) == (14, 1)
        assert fix.insert_text == "\n" + " " * 16
        assert _fixed(source, violations) == "try { foo(); }\n" + " " * 16 + "catch (e) { bar(); }"

    def test_finally_without_catch(self) -> None:
        """The finally keyword itself is reported."""
        text = "try {\n    foo();\n} finally {\n    done();\n}\n"
        source = parse(text, try_(block("foo();"), finally_=block("done();")))

        violations = _inspect_try(source)

        assert len(violations) == 1
        assert violations[0].node.kind is NodeKind.FINALLY_KEYWORD
        assert violations[0].fix == Fix(start_offset=18, remove_width=1, insert_text="\n")

    def test_catch_on_own_line_finally_not(self) -> None:
        """Only the offending keyword is reported."""
        text = "try {\n}\ncatch (e) {\n} finally {\n}\n"
        source = parse(text, try_(block(), catch=block(), finally_=block()))

        violations = _inspect_try(source)

        assert [v.node.kind for v in violations] == [NodeKind.FINALLY_KEYWORD]

    def test_catch_and_finally_nested(self) -> None:
        """Both keywords reported in order, indented to the try statement."""
        text = (
            "function f() {\n"
            "    try {\n"
            "        foo();\n"
            "    } catch (e) {\n"
            "        bar();\n"
            "    } finally {\n"
            "        baz();\n"
            "    }\n"
            "}\n"
        )
        source = parse(
            text,
            function("f", try_(block("foo();"), catch=block("bar();"), finally_=block("baz();"))),
        )

        violations = _inspect_try(source)

        assert [v.node.kind for v in violations] == [NodeKind.CATCH_CLAUSE, NodeKind.FINALLY_KEYWORD]
        assert _fixed(source, violations) == (
            "function f() {\n"
            "    try {\n"
            "        foo();\n"
            "    }\n"
            "    catch (e) {\n"
            "        bar();\n"
            "    }\n"
            "    finally {\n"
            "        baz();\n"
            "    }\n"
            "}\n"
        )

    def test_no_separator_inserts_only(self) -> None:
        """'}catch' gets a pure insertion so the keyword is kept."""
        text = "try {\n}catch (e) {\n}\n"
        source = parse(text, try_(block(), catch=block()))

        violations = _inspect_try(source)

        assert violations[0].fix == Fix(start_offset=7, remove_width=0, insert_text="\n")
        assert _fixed(source, violations) == "try {\n}\ncatch (e) {\n}\n"

    def test_try_without_handlers(self) -> None:
        """Try statement with neither catch nor finally is accepted."""
        source = parse("try {\n}\n", try_(block()))

        assert _inspect_try(source) == ()

    def test_missing_body_skipped(self) -> None:
        """Finally keyword without preceding block is skipped, not raised."""
        source = parse(
            "finally {}",
            node(NodeKind.TRY_STATEMENT, tok("finally", NodeKind.FINALLY_KEYWORD), block()),
        )

        assert _inspect_try(source) == ()

    def test_fixed_text_has_no_violation(self) -> None:
        """Re-checking the fixed source reports nothing."""
        text = "try {\n    foo();\n} catch (e) {\n    bar();\n} finally {\n}\n"
        parts = try_(block("foo();"), catch=block("bar();"), finally_=block())
        source = parse(text, parts)
        fixed = _fixed(source, _inspect_try(source))

        assert _inspect_try(parse(fixed, parts)) == ()


class TestIfStatement:
    """Tests for else placement."""

    def test_braced_else_on_same_line(self) -> None:
        """'} else' in a braced if is reported."""
        text = "if (x) { a(); } else { b(); }"
        source = parse(text, if_("x", block("a();"), block("b();")))

        violations = _inspect_if(source)

        assert len(violations) == 1
        assert violations[0].node.kind is NodeKind.ELSE_KEYWORD
        fix = violations[0].fix
        assert fix is not None
        assert (fix.start_offset, fix.remove_width) == (15, 1)

    def test_multiline_else_fix(self) -> None:
        """Else moves to its own line at the if statement's level."""
        text = "if (x) {\n    a();\n} else {\n    b();\n}\n"
        source = parse(text, if_("x", block("a();"), block("b();")))

        violations = _inspect_if(source)

        assert violations[0].fix == Fix(start_offset=19, remove_width=1, insert_text="\n")
        assert _fixed(source, violations) == "if (x) {\n    a();\n}\nelse {\n    b();\n}\n"

    def test_unbraced_exempt(self) -> None:
        """Without any block, else placement is not checked."""
        text = "if (x) a(); else b();"
        source = parse(text, if_("x", "a();", "b();"))

        assert _inspect_if(source) == ()

    def test_no_else(self) -> None:
        """If without else is accepted."""
        source = parse("if (x) {\n    a();\n}\n", if_("x", block("a();")))

        assert _inspect_if(source) == ()

    def test_else_on_own_line(self) -> None:
        """Else already on its own line is accepted."""
        text = "if (x) {\n    a();\n}\nelse {\n    b();\n}\n"
        source = parse(text, if_("x", block("a();"), block("b();")))

        assert _inspect_if(source) == ()

    def test_tabs(self) -> None:
        """Tab config indents the keyword with tabs."""
        text = "function f() {\n\tif (x) {\n\t\ta();\n\t} else {\n\t\tb();\n\t}\n}\n"
        source = parse(text, function("f", if_("x", block("a();"), block("b();"))))

        violations = _inspect_if(source, RuleConfig(use_tabs=True))

        assert violations[0].fix is not None
        assert violations[0].fix.insert_text == "\n\t"
        assert _fixed(source, violations) == (
            "function f() {\n\tif (x) {\n\t\ta();\n\t}\n\telse {\n\t\tb();\n\t}\n}\n"
        )

    def test_else_without_predecessor_skipped(self) -> None:
        """Else as first child is skipped, not raised."""
        source = parse("else {}", node(NodeKind.IF_STATEMENT, tok("else", NodeKind.ELSE_KEYWORD), block()))

        assert _inspect_if(source) == ()

    def test_fixed_text_has_no_violation(self) -> None:
        """Re-checking the fixed source reports nothing."""
        text = "if (x) {\n    a();\n} else {\n    b();\n}\n"
        parts = if_("x", block("a();"), block("b();"))
        source = parse(text, parts)
        fixed = _fixed(source, _inspect_if(source))

        assert _inspect_if(parse(fixed, parts)) == ()

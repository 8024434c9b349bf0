from screener.highlighting.highlighter import Highlighter


class TestWholeWordMarking:
    def test_marks_standalone_word_only(self) -> None:
        result = Highlighter().highlight("AI is useful; we maintain AI tools", ["AI"])
        assert result == "<mark>AI</mark> is useful; we maintain <mark>AI</mark> tools"

    def test_case_insensitive_and_preserves_original_case(self) -> None:
        result = Highlighter().highlight("Python and python and PYTHON", ["python"])
        assert result == "<mark>Python</mark> and <mark>python</mark> and <mark>PYTHON</mark>"

    def test_keywords_with_symbols_are_literal(self) -> None:
        result = Highlighter().highlight("C++ and C# and node.js, not nodexjs", ["c++", "c#", "node.js"])
        assert result == (
            "<mark>C++</mark> and <mark>C#</mark> and <mark>node.js</mark>, not nodexjs"
        )

    def test_multi_word_keyword(self) -> None:
        result = Highlighter().highlight("Worked on Machine Learning pipelines", ["machine learning"])
        assert result == "Worked on <mark>Machine Learning</mark> pipelines"


class TestOverlaps:
    def test_overlapping_keywords_wrapped_once(self) -> None:
        result = Highlighter().highlight("Deep Learning expert", ["learning", "deep learning"])
        assert result == "<mark>Deep Learning</mark> expert"

    def test_duplicate_keywords_do_not_nest(self) -> None:
        result = Highlighter().highlight("sql sql", ["sql", "SQL", "sql"])
        assert result == "<mark>sql</mark> <mark>sql</mark>"

    def test_marker_text_is_never_rematched(self) -> None:
        result = Highlighter().highlight("mark my words", ["mark", "words"])
        assert result == "<mark>mark</mark> my <mark>words</mark>"


class TestPassThrough:
    def test_whitespace_and_line_breaks_preserved(self) -> None:
        text = "Skills:\n\tDocker  and\r\nAWS "
        result = Highlighter().highlight(text, ["docker", "aws"])
        assert result == "Skills:\n\t<mark>Docker</mark>  and\r\n<mark>AWS</mark> "

    def test_removing_markers_restores_text(self) -> None:
        text = "Go, Rust and Golang"
        result = Highlighter().highlight(text, ["go", "rust"])
        assert result.replace("<mark>", "").replace("</mark>", "") == text

    def test_no_keywords_returns_text_unchanged(self) -> None:
        assert Highlighter().highlight("plain text", []) == "plain text"

    def test_empty_keyword_ignored(self) -> None:
        assert Highlighter().highlight("plain text", [""]) == "plain text"

    def test_custom_markers(self) -> None:
        result = Highlighter(start_tag="**", end_tag="**").highlight("use SQL daily", ["sql"])
        assert result == "use **SQL** daily"

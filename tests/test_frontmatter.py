from api_docs_gen.lint.frontmatter import is_duplicate_heading, read_frontmatter_lines, split_frontmatter


class TestIsDuplicateHeading:
    def test_identical(self):
        assert is_duplicate_heading("Audio API", "Audio API")

    def test_case_and_punctuation_ignored(self):
        assert is_duplicate_heading("Audio API", "audio-api!")

    def test_heading_extends_title(self):
        assert is_duplicate_heading("Audio Processing", "Audio Processing Endpoints")

    def test_title_extends_heading(self):
        assert is_duplicate_heading("Audio Processing Endpoints", "Audio Processing")

    def test_unrelated(self):
        assert not is_duplicate_heading("Overview", "Getting Started")

    def test_short_generic_title_matches(self):
        assert is_duplicate_heading("API", "API Reference")


class TestReadFrontmatterLines:
    def test_title_and_end(self):
        lines = ["---", 'title: "Audio API"', "description: x", "---", "body"]
        assert read_frontmatter_lines(lines) == ("Audio API", 3)

    def test_single_quotes_stripped(self):
        assert read_frontmatter_lines(["---", "title: 'Audio'", "---"]) == ("Audio", 2)

    def test_no_frontmatter(self):
        assert read_frontmatter_lines(["# Title", "---"]) is None

    def test_unclosed(self):
        assert read_frontmatter_lines(["---", "title: A"]) is None

    def test_no_title(self):
        assert read_frontmatter_lines(["---", "description: x", "---"]) is None


class TestSplitFrontmatter:
    def test_title_description_end(self):
        text = '---\ntitle: "Audio API"\ndescription: Audio endpoints\n---\nbody\n'
        fm = split_frontmatter(text)
        assert fm.title == "Audio API"
        assert fm.description == "Audio endpoints"
        assert text[fm.end:] == "body\n"

    def test_missing_description(self):
        fm = split_frontmatter("---\ntitle: A\n---\n")
        assert fm.description == ""

    def test_no_block(self):
        assert split_frontmatter("## Heading\n") is None

    def test_no_title(self):
        assert split_frontmatter("---\ndescription: x\n---\n") is None

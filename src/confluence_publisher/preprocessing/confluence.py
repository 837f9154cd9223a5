"""Markdown to Confluence storage format conversion."""

import logging

import markdown
from bs4 import BeautifulSoup, CData

logger = logging.getLogger("confluence-publisher.preprocessing.confluence")

MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


class ConfluencePreprocessor:
    """Converts Markdown into the XHTML storage representation of Confluence."""

    def __init__(self, extensions: list[str] | None = None) -> None:
        self.extensions = list(extensions or MARKDOWN_EXTENSIONS)

    def markdown_to_confluence_storage(self, markdown_content: str) -> str:
        """
        Convert Markdown content to Confluence storage format.

        Fenced code blocks become Confluence code macros so they keep their
        language and are not mangled by the editor.

        Args:
            markdown_content: Markdown text

        Returns:
            Storage format markup
        """
        html_content = markdown.markdown(
            markdown_content, extensions=self.extensions, output_format="xhtml"
        )
        if "<pre>" not in html_content:
            return html_content

        soup = BeautifulSoup(html_content, "html.parser")
        converted = 0
        for pre in soup.find_all("pre"):
            code = pre.find("code")
            if code is None:
                continue
            pre.replace_with(self._code_macro(soup, code))
            converted += 1

        logger.debug(f"Converted {converted} code blocks to code macros")

        return str(soup)

    def _code_macro(self, soup: BeautifulSoup, code):
        macro = soup.new_tag(
            "ac:structured-macro",
            attrs={"ac:name": "code", "ac:schema-version": "1"},
        )

        language = self._code_language(code)
        if language:
            parameter = soup.new_tag("ac:parameter", attrs={"ac:name": "language"})
            parameter.string = language
            macro.append(parameter)

        # "]]>" cannot appear inside a CDATA section, so split it across two
        text = code.get_text().replace("]]>", "]]]]><![CDATA[>")
        body = soup.new_tag("ac:plain-text-body")
        body.append(CData(text))
        macro.append(body)
        return macro

    @staticmethod
    def _code_language(code) -> str | None:
        for css_class in code.get("class") or []:
            if css_class.startswith("language-"):
                return css_class[len("language-"):]
        return None

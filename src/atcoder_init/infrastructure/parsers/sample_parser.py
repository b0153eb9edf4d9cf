"""Parser for extracting sample cases from AtCoder task pages."""

from typing import Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from atcoder_init.domain.models import Sample, SampleBlock

INPUT_LABEL = "入力例"
OUTPUT_LABEL = "出力例"


class SampleParser:
    """Parser for the Japanese sample blocks of a task statement."""

    def parse(self, html: str) -> list[Sample]:
        """
        Parse a task page and pair its numbered inputs with outputs.

        Inputs and outputs are paired in document order; an unmatched
        trailing block on either side is dropped. A page without Japanese
        sample headings yields an empty list.
        """
        blocks = self.extract_blocks(html)

        inputs = [block.text for block in blocks if block.is_input]
        outputs = [block.text for block in blocks if not block.is_input]
        if len(inputs) != len(outputs):
            logger.debug(
                f"Unbalanced samples: {len(inputs)} input(s), {len(outputs)} output(s)"
            )

        return [Sample(input=i, output=o) for i, o in zip(inputs, outputs)]

    def extract_blocks(self, html: str) -> list[SampleBlock]:
        """Find every statement part carrying a sample heading, in document order."""
        soup = BeautifulSoup(html, "lxml")

        blocks = []
        for part in soup.select("#task-statement .part"):
            block = self._extract_block(part)
            if block:
                blocks.append(block)
        return blocks

    def _extract_block(self, part: Tag) -> Optional[SampleBlock]:
        for heading in part.find_all("h3"):
            title = _heading_text(heading)
            if title.startswith(INPUT_LABEL):
                is_input = True
            elif title.startswith(OUTPUT_LABEL):
                is_input = False
            else:
                continue

            pre = part.find("pre")
            if not pre:
                return None

            tokens = title.split()
            index = tokens[1] if len(tokens) > 1 else ""
            # Inner HTML on purpose: entities such as &lt; are kept as-is.
            return SampleBlock(text=pre.decode_contents(), index=index, is_input=is_input)

        return None


def _heading_text(heading: Tag) -> str:
    """Heading text without nested widgets such as the "Copy" button."""
    own = "".join(heading.find_all(string=True, recursive=False)).strip()
    return own or heading.get_text(" ", strip=True)

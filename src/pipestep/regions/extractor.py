from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional

from pipestep.core.models import Region
from pipestep.logging.helpers import get_logger, trace_regions
from pipestep.regions.patterns import PatternLike, compile_single_group


class RegionExtractor:
    """Left-to-right, non-overlapping scan of a single-capture pattern.

    A group that does not participate in a match yields an empty region
    located at the end of that match.
    """

    def __init__(self, pattern: PatternLike, *, logger: Optional[logging.Logger] = None) -> None:
        self._regex = compile_single_group(pattern)
        self._log = logger or get_logger('regions.extractor')

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex

    def iter_regions(self, text: str) -> Iterator[Region]:
        for index, m in enumerate(self._regex.finditer(text)):
            start, end = m.span(1)
            if start < 0:
                yield Region(index=index, text='', start=m.end(), end=m.end())
                continue
            yield Region(index=index, text=m.group(1), start=start, end=end)

    def extract(self, text: str) -> List[Region]:
        regions = list(self.iter_regions(text))
        trace_regions(self._log, 'extracted regions', pattern=self._regex.pattern, count=len(regions))
        return regions

    def captures(self, text: str) -> List[str]:
        return [region.text for region in self.iter_regions(text)]

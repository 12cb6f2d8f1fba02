"""
Domain errors for the scraping pipeline
"""


class ScraperError(Exception):
    """Base class for every failure inside the scrape pipeline"""


class RenderError(ScraperError):
    """Browser launch, navigation or selector wait failed"""

    def __init__(self, message: str, url: str = None):
        self.url = url
        super().__init__(message)


class ExtractionError(ScraperError):
    """The parser itself failed on the rendered markup"""

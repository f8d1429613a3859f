"""
List URL Value Object

Normalises Letterboxd list URLs into the detail-view form the list backend
expects.
"""

from dataclasses import dataclass

from ..exceptions import ValidationError

LETTERBOXD_DOMAIN = "letterboxd.com"
ACCEPTED_PREFIXES = ("https://www.", "https://", "http://www.", "http://", "www.", "")


@dataclass(frozen=True)
class ListUrl:
    """A list at https://letterboxd.com/<username>/list/<list_title>/"""
    username: str
    list_title: str

    @classmethod
    def parse(cls, url: str) -> "ListUrl":
        if not url or not url.strip():
            raise ValidationError("List URL cannot be empty")
        text = url.strip()

        for prefix in ACCEPTED_PREFIXES:
            if text.startswith(prefix + LETTERBOXD_DOMAIN):
                path = text[len(prefix + LETTERBOXD_DOMAIN):]
                break
        else:
            raise ValidationError(f"Not a {LETTERBOXD_DOMAIN} URL: {url}")

        path = path.split("?", 1)[0].split("#", 1)[0]
        parts = path.split("/")
        # ['', username, 'list', title, ...]
        if len(parts) < 4 or not parts[1] or parts[2] != "list" or not parts[3]:
            raise ValidationError(f"Not a list URL: {url}")
        return cls(username=parts[1], list_title=parts[3])

    @property
    def detail_path(self) -> str:
        return f"/{self.username}/list/{self.list_title}/detail/"

    @property
    def grid_path(self) -> str:
        return f"/{self.username}/list/{self.list_title}/"

    @property
    def detail_url(self) -> str:
        return f"https://{LETTERBOXD_DOMAIN}{self.detail_path}"

    @property
    def grid_url(self) -> str:
        return f"https://{LETTERBOXD_DOMAIN}{self.grid_path}"

    def __str__(self) -> str:
        return self.detail_url


def is_valid_url(url: str) -> bool:
    """Check whether a string parses as a Letterboxd list URL"""
    try:
        ListUrl.parse(url)
    except ValidationError:
        return False
    return True

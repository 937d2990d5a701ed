"""GitHub git-refs API client — GET, POST and PATCH on tag references."""

import enum
from dataclasses import dataclass
from urllib.parse import quote

import requests

DEFAULT_TIMEOUT = 30
MISSING_REF_MESSAGE = "Reference does not exist"


class TransportError(Exception):
    """The request never produced an HTTP response."""


class RefStatus(enum.Enum):
    OK = "ok"
    MISSING = "missing"
    ERROR = "error"


@dataclass
class RefResponse:
    status: RefStatus
    name: str
    commit: str | None = None
    message: str | None = None

    def points_at(self, commit: str) -> bool:
        return self.status is RefStatus.OK and self.commit == commit


def tag_ref(name: str) -> str:
    return f"refs/tags/{name}"


class RefsClient:
    def __init__(
        self,
        owner: str,
        repo: str,
        token: str,
        api_url: str = "https://api.github.com",
        session: requests.Session | None = None,
    ):
        self.base_url = f"{api_url.rstrip('/')}/repos/{owner}/{repo}/git"
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github+json",
            }
        )

    def get_ref(self, name: str) -> RefResponse:
        """Fetch refs/tags/<name>."""
        return self._request("GET", f"ref/tags/{quote(name, safe='/')}", tag_ref(name))

    def create_ref(self, name: str, commit: str) -> RefResponse:
        """Create refs/tags/<name> pointing at commit."""
        body = {"ref": tag_ref(name), "sha": commit}
        return self._request("POST", "refs", tag_ref(name), body)

    def update_ref(self, name: str, commit: str, force: bool = True) -> RefResponse:
        """Move refs/tags/<name> to commit."""
        body = {"sha": commit, "force": force}
        return self._request("PATCH", f"refs/tags/{quote(name, safe='/')}", tag_ref(name), body)

    def _request(self, method: str, path: str, ref: str, body: dict | None = None) -> RefResponse:
        url = f"{self.base_url}/{path}"
        try:
            response = self.session.request(method, url, json=body, timeout=DEFAULT_TIMEOUT)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        return parse_response(response, ref)


def _json_body(response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def parse_response(response, ref: str) -> RefResponse:
    """Map an HTTP response onto the three-way missing / ok / error split.

    GitHub answers 404 for a missing ref on GET and 422 with
    "Reference does not exist" when PATCHing one.
    """
    data = _json_body(response)
    message = data.get("message") or getattr(response, "reason", None)

    if response.status_code in (200, 201):
        commit = (data.get("object") or {}).get("sha")
        if commit is None:
            return RefResponse(RefStatus.ERROR, ref, message="Response is missing object.sha")
        return RefResponse(RefStatus.OK, ref, commit=commit)

    if response.status_code == 404:
        return RefResponse(RefStatus.MISSING, ref, message=message)
    if response.status_code == 422 and message == MISSING_REF_MESSAGE:
        return RefResponse(RefStatus.MISSING, ref, message=message)

    return RefResponse(RefStatus.ERROR, ref, message=message)

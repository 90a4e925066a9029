"""HTTP client for the pvoutput.org r2 service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from src.processor.reading_set import ReadingSet
from src.uploader.fields import DEFAULT_CONDITION, build_output_fields, build_status_fields

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://pvoutput.org"
STATUS_PATH = "/service/r2/addstatus.jsp"
OUTPUT_PATH = "/service/r2/addoutput.jsp"


class UploadError(RuntimeError):
    """The request never got an HTTP response (DNS, connect, timeout …)."""


@dataclass(frozen=True, slots=True)
class PvOutputSettings:
    """The ``pvoutput`` section of the YAML config."""

    system_id: str | None = None
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout_sec: float = 10.0
    round_status_time: bool = False
    condition: str = DEFAULT_CONDITION

    @classmethod
    def from_dict(cls, cfg: dict[str, Any]) -> PvOutputSettings:
        system_id = cfg.get("system_id")
        api_key = cfg.get("api_key")
        return cls(
            system_id=str(system_id) if system_id is not None else None,
            api_key=str(api_key) if api_key is not None else None,
            base_url=str(cfg.get("base_url", DEFAULT_BASE_URL)),
            timeout_sec=float(cfg.get("timeout_sec", 10.0)),
            round_status_time=bool(cfg.get("round_status_time", False)),
            condition=str(cfg.get("condition", DEFAULT_CONDITION)),
        )


class PvOutputClient:
    """Posts form-encoded field sets, authenticated by two custom headers."""

    def __init__(
        self,
        system_id: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_sec: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.system_id = system_id
        self.base_url = base_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "X-Pvoutput-Apikey": api_key,
                "X-Pvoutput-SystemId": system_id,
            }
        )

    def post(self, path: str, data: dict[str, str]) -> bool:
        """POST *data* to *path*. Returns True on HTTP 200.

        Raises:
            UploadError: On any transport-level failure.
        """
        url = self.base_url + path
        try:
            response = self.session.post(url, data=data, timeout=self.timeout_sec)
        except requests.exceptions.RequestException as exc:
            raise UploadError(f"POST {url} failed: {exc}") from exc

        if response.status_code != 200:
            log.warning(
                "pvoutput rejected %s (HTTP %d): %s",
                path,
                response.status_code,
                response.text.strip(),
            )
            return False
        log.info("pvoutput accepted %s for system %s", path, self.system_id)
        return True

    def close(self) -> None:
        self.session.close()

    def add_status(self, data: dict[str, str]) -> bool:
        return self.post(STATUS_PATH, data)

    def add_output(self, data: dict[str, str]) -> bool:
        return self.post(OUTPUT_PATH, data)


def send_to_pvoutput(
    readings: ReadingSet,
    client: PvOutputClient,
    date: str,
    round_status_time: bool = False,
    condition: str = DEFAULT_CONDITION,
) -> dict[str, bool]:
    """Submit the status snapshot and the daily output for one file.

    The status snapshot describes the latest sample, so it is skipped
    while the file ends inside an open outage. The daily output is
    always sent.

    Returns:
        Mapping of submitted endpoint ("status"/"output") -> accepted.
    """
    results: dict[str, bool] = {}
    if readings.in_outage:
        log.info("%s ends inside an outage, status snapshot not sent", readings.source)
    else:
        results["status"] = client.add_status(
            build_status_fields(readings, date, round_time=round_status_time)
        )
    results["output"] = client.add_output(build_output_fields(readings, date, condition))
    return results

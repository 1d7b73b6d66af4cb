# census_geocoder/geocode/query.py
from typing import Dict
from urllib.parse import urlencode

from .errors import MissingRequiredField
from .parser import StructuredAddress

BENCHMARK = "Public_AR_Current"


def build_street(structured: StructuredAddress) -> str:
    parts = [structured.number, structured.street, structured.type, structured.suffix]
    return " ".join(p for p in parts if p)


def build_query(structured: StructuredAddress, location: str = "") -> Dict[str, str]:
    """
    Map a parsed address onto the parameters the census endpoint expects.
    Raises MissingRequiredField when city or state is absent.
    """
    missing = [f for f in ("city", "state") if not getattr(structured, f)]
    if missing:
        raise MissingRequiredField(location, missing)

    params = {
        "benchmark": BENCHMARK,
        "format": "json",
        "city": structured.city,
        "state": structured.state,
    }
    if structured.street:
        params["street"] = build_street(structured)
    return params


def build_url(host: str, params: Dict[str, str]) -> str:
    return f"https://{host}?{urlencode(params)}"

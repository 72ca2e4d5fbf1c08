"""Form field metadata for the calculator page, loaded from config/form.yaml."""

from datetime import date
from typing import Any

from pydantic import BaseModel

from config import load_yaml_config
from config.settings import settings


class FormField(BaseModel):
    """One input on the calculator form."""

    name: str
    label: str
    description: str | None = None
    minimum: float | None = None
    maximum: float | None = None
    default: float | None = None
    messages: dict[str, str] = {}


class FormSpec(BaseModel):
    """The whole calculator form."""

    title: str
    description: str
    submit_label: str
    fields: list[FormField]


def load_form(today: date | None = None) -> FormSpec:
    """Load the form definition and fill in run-time defaults.

    The month defaults to the current calendar month and the threshold to
    the configured monthly threshold.
    """
    raw: dict[str, Any] = load_yaml_config("form.yaml")["form"]
    form = FormSpec.model_validate(raw)
    today = today or date.today()
    for field in form.fields:
        if field.name == "current_month":
            field.default = float(today.month)
        elif field.name == "threshold":
            field.default = float(settings.default_monthly_threshold)
    return form

"""
Zendesk Support client - ticket forms and end-user request submission.

Uses API token authentication: HTTP Basic with "{email}/token" as the user
name and the API token as the password.
"""

import logging
from typing import Any, List, Optional

import httpx

from src.config import Settings
from src.search.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

# Tag added to every request created through the widget
WIDGET_TAG = "support-widget"


def build_request_payload(
    email: str,
    subject: str,
    message: str,
    name: Optional[str] = None,
    category: Optional[str] = None,
    ticket_form_id: Optional[int] = None,
    custom_fields: Optional[List[dict]] = None,
) -> dict:
    """
    Build the Requests API payload for a new support request.

    The requester name defaults to the local part of the email address.
    The category (if any) is sent as an extra tag.
    """
    tags = [WIDGET_TAG]
    if category:
        tags.append(category)

    request: dict = {
        "requester": {
            "name": name or email.split("@")[0],
            "email": email,
        },
        "subject": subject,
        "comment": {"body": message},
        "tags": tags,
    }
    if ticket_form_id:
        request["ticket_form_id"] = ticket_form_id
    if custom_fields is not None:
        request["custom_fields"] = custom_fields

    return {"request": request}


class SupportClient:
    """Authenticated client for ticket forms and the Requests API"""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self.settings = settings
        self.http_client = http_client
        self.base_url = f"{settings.zendesk_base_url}/api/v2"
        self.auth = httpx.BasicAuth(f"{settings.zendesk_email}/token", settings.zendesk_api_token or "")

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.http_client.request(
                method,
                url,
                auth=self.auth,
                headers={"Content-Type": "application/json"},
                **kwargs,
            )
        except httpx.HTTPError as e:
            logger.error(f"Zendesk request failed: {method} {url} ({type(e).__name__}: {e})")
            raise UpstreamUnavailable(locator=url, reason=type(e).__name__) from e

        if not response.is_success:
            # Upstream body goes to the log only, never back to the caller
            logger.error(f"Zendesk returned {response.status_code} for {method} {url}: {response.text[:500]}")
            raise UpstreamUnavailable(status_code=response.status_code, locator=url)

        return response

    async def list_ticket_forms(self) -> List[dict]:
        """Active ticket forms visible to end users"""
        response = await self._request(
            "GET",
            f"{self.base_url}/ticket_forms.json",
            params={"active": "true", "end_user_visible": "true"},
        )
        forms = response.json().get("ticket_forms") or []
        return [
            {
                "id": form.get("id"),
                "name": form.get("name"),
                "display_name": form.get("display_name"),
                "active": form.get("active"),
                "default": form.get("default"),
                "ticket_field_ids": form.get("ticket_field_ids"),
            }
            for form in forms
        ]

    async def get_ticket_form(self, form_id: str) -> dict:
        """
        Ticket form with its end-user visible fields and conditional rules.

        Returns:
            {"form": {id, name, display_name}, "fields": [...], "conditions": [...]}
            Fields are empty if the ticket fields call fails.
        """
        response = await self._request("GET", f"{self.base_url}/ticket_forms/{form_id}.json")
        form = response.json().get("ticket_form") or {}

        try:
            fields_response = await self._request("GET", f"{self.base_url}/ticket_fields.json")
            all_fields = fields_response.json().get("ticket_fields") or []
        except UpstreamUnavailable:
            logger.warning(f"Ticket fields unavailable for form {form_id}, returning form without fields")
            all_fields = []

        form_field_ids = form.get("ticket_field_ids") or []
        fields = [
            {
                "id": field.get("id"),
                "type": field.get("type"),
                "title": field.get("title"),
                "description": field.get("description"),
                "required": field.get("required_in_portal"),
                "options": field.get("custom_field_options") or field.get("system_field_options") or [],
            }
            for field in all_fields
            if field.get("id") in form_field_ids and field.get("visible_in_portal")
        ]

        return {
            "form": {
                "id": form.get("id"),
                "name": form.get("name"),
                "display_name": form.get("display_name"),
            },
            "fields": fields,
            "conditions": form.get("end_user_conditions") or [],
        }

    async def create_request(self, **submission: Any) -> Optional[int]:
        """
        Create an end-user support request.

        Args:
            **submission: Keyword arguments of build_request_payload()

        Returns:
            ID of the created request
        """
        payload = build_request_payload(**submission)
        response = await self._request("POST", f"{self.base_url}/requests.json", json=payload)
        request_id = (response.json().get("request") or {}).get("id")
        logger.info(f"Created support request {request_id} (tags={payload['request']['tags']})")
        return request_id

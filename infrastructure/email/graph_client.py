# infrastructure/email/graph_client.py
from __future__ import annotations
import logging
import base64
from typing import Dict, Any, Iterable, Optional
import requests
import msal
import time

from domain.models import Attachment

logger = logging.getLogger(__name__)

GRAPH_SCOPES = ["https://graph.microsoft.com/.default"]


class GraphMailClient:
    """MailTransport sobre Microsoft Graph (sendMail). Envía en nombre del buzón 'sender'."""

    def __init__(
        self,
        *,
        tenant_id: str,
        client_id: str,
        client_secret: str,
        base: str = "https://graph.microsoft.com/v1.0",
        timeout: int = 30,
    ) -> None:
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_secret = client_secret
        self.base = base.rstrip("/")
        self.timeout = timeout
        self._app: Optional[msal.ConfidentialClientApplication] = None
        self._token: Optional[str] = None
        self._token_expires_at: float = 0.0

    # ───────── auth ─────────
    def _acquire_token(self) -> str:
        """
        Obtiene un access_token de MSAL y controla la caducidad.
        Reutiliza el token si le queda más de 60 s de vida.
        """
        now = time.time()
        if self._token and (self._token_expires_at - 60) > now:
            return self._token

        if self._app is None:
            self._app = msal.ConfidentialClientApplication(
                client_id=self.client_id,
                client_credential=self.client_secret,
                authority=f"https://login.microsoftonline.com/{self.tenant_id}",
            )

        # Intento silencioso (caché in-memory de MSAL) y, si no, solicitud normal.
        result = self._app.acquire_token_silent(scopes=GRAPH_SCOPES, account=None)
        if not result:
            result = self._app.acquire_token_for_client(scopes=GRAPH_SCOPES)

        if "access_token" not in result:
            raise RuntimeError(f"MSAL token error: {result.get('error')} {result.get('error_description', '')}".strip())

        self._token = result["access_token"]
        self._token_expires_at = now + float(result.get("expires_in", 3600))
        return self._token

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._acquire_token()}", "Content-Type": "application/json"}

    # ───────── HTTP ─────────
    def _post(self, url: str, json: Dict[str, Any]) -> requests.Response:
        """Devuelve el Response (Graph responde 202 sin cuerpo)."""
        r = requests.post(url, headers=self._headers(), json=json, timeout=self.timeout)
        if r.status_code == 401:
            # Token caducado → forzamos refresh y reintentamos UNA vez
            self._token = None
            self._token_expires_at = 0.0
            r = requests.post(url, headers=self._headers(), json=json, timeout=self.timeout)
        r.raise_for_status()
        return r

    # ───────── payload ─────────
    @staticmethod
    def build_message(
        to: Iterable[str],
        subject: str,
        body: str,
        attachments: Iterable[Attachment] = (),
        use_html_body: bool = False,
    ) -> Dict[str, Any]:
        return {
            "message": {
                "subject": subject,
                "body": {"contentType": "HTML" if use_html_body else "Text", "content": body},
                "toRecipients": [{"emailAddress": {"address": a}} for a in to],
                "attachments": [
                    {
                        "@odata.type": "#microsoft.graph.fileAttachment",
                        "name": att.filename,
                        "contentType": att.content_type or "application/octet-stream",
                        "contentBytes": base64.b64encode(att.content).decode("ascii"),
                    }
                    for att in attachments
                ],
            },
            "saveToSentItems": True,
        }

    def _send_mail(self, sender: str, payload: Dict[str, Any]) -> None:
        url = f"{self.base}/users/{sender}/sendMail"
        r = self._post(url, json=payload)
        # OK típico: 202 Accepted con cuerpo vacío
        logger.info("Graph sendMail status=%s destinatarios=%d", r.status_code, len(payload["message"]["toRecipients"]))

    # ───────── MailTransport ─────────
    def send(self, sender: str, to: str, subject: str, body: str) -> None:
        self._send_mail(sender, self.build_message([to], subject, body))

    def send_many(self, sender: str, to: Iterable[str], subject: str, body: str) -> None:
        self._send_mail(sender, self.build_message(to, subject, body))

    def send_with_attachments(
        self,
        sender: str,
        to: Iterable[str],
        subject: str,
        body: str,
        attachments: Iterable[Attachment],
        use_html_body: bool,
    ) -> None:
        self._send_mail(sender, self.build_message(to, subject, body, attachments, use_html_body))

"""Email Templates — pure renderers for the transactional emails.

Invariants:
    - Every user-supplied value is HTML-escaped before interpolation
    - Renderers return EmailMessage; sending is the infrastructure layer's job
    - Optional phone line is omitted (not rendered empty) when absent

Design Decisions:
    - Templates in French: the site's audience and owner are French-speaking
    - Inline styles only: email clients strip <style> blocks
"""

from dataclasses import dataclass, field
from html import escape


@dataclass(frozen=True)
class EmailMessage:
    """Provider-agnostic outgoing email."""
    sender: str
    to: list[str]
    subject: str
    html: str
    reply_to: str | None = None
    tags: dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> dict:
        """Body for the email provider's send endpoint."""
        payload = {
            "from": self.sender,
            "to": self.to,
            "subject": self.subject,
            "html": self.html,
        }
        if self.reply_to:
            payload["reply_to"] = self.reply_to
        if self.tags:
            payload["tags"] = [{"name": k, "value": v} for k, v in self.tags.items()]
        return payload


@dataclass(frozen=True)
class PaymentInstruction:
    """Mobile-money account shown to buyers who pay manually."""
    provider: str
    number: str


def render_contact_owner(
    *, sender: str, owner_email: str, name: str, email: str,
    phone: str | None, subject: str, message: str,
) -> EmailMessage:
    """Notification to the site owner about a new contact-form message."""
    phone_line = (
        f"<p><strong>Téléphone:</strong> {escape(phone)}</p>" if phone else ""
    )
    html = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h1 style="color: #00CED1; border-bottom: 2px solid #00CED1; padding-bottom: 10px;">
    Nouveau message de contact
  </h1>
  <div style="background-color: #f5f5f5; padding: 20px; border-radius: 5px; margin: 20px 0;">
    <h2 style="color: #333; margin-top: 0;">Informations du contact</h2>
    <p><strong>Nom:</strong> {escape(name)}</p>
    <p><strong>Email:</strong> <a href="mailto:{escape(email)}">{escape(email)}</a></p>
    {phone_line}
    <p><strong>Type de projet:</strong> {escape(subject)}</p>
  </div>
  <div style="background-color: #fff; padding: 20px; border-left: 4px solid #00CED1; margin: 20px 0;">
    <h3 style="color: #333; margin-top: 0;">Message</h3>
    <p style="white-space: pre-wrap; line-height: 1.6;">{escape(message)}</p>
  </div>
  <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #ddd; color: #666; font-size: 12px;">
    <p>Ce message a été envoyé depuis le formulaire de contact de votre site web.</p>
  </div>
</div>
"""
    return EmailMessage(
        sender=sender,
        to=[owner_email],
        subject=f"Nouveau message de contact: {subject}",
        html=html,
        reply_to=email,
        tags={"kind": "contact_owner"},
    )


def render_contact_confirmation(
    *, sender: str, brand: str, signature: str, footer: str,
    name: str, email: str, subject: str, message: str,
) -> EmailMessage:
    """Acknowledgement sent back to the visitor."""
    html = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h1 style="color: #00CED1;">Merci de nous avoir contacté !</h1>
  <p>Bonjour {escape(name)},</p>
  <p>Nous avons bien reçu votre message concernant : <strong>{escape(subject)}</strong></p>
  <div style="background-color: #f5f5f5; padding: 20px; border-radius: 5px; margin: 20px 0;">
    <h3 style="color: #333; margin-top: 0;">Votre message</h3>
    <p style="white-space: pre-wrap; line-height: 1.6;">{escape(message)}</p>
  </div>
  <p>Nous reviendrons vers vous dans les plus brefs délais, généralement sous 24 heures.</p>
  <p>Cordialement,<br>{signature}</p>
  <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #ddd; color: #666; font-size: 12px;">
    <p>{escape(footer)}</p>
  </div>
</div>
"""
    return EmailMessage(
        sender=sender,
        to=[email],
        subject=f"Message bien reçu - {brand}",
        html=html,
        tags={"kind": "contact_confirmation"},
    )


def render_purchase_notification(
    *, sender: str, owner_email: str, site_title: str, site_id: str,
    buyer_name: str, buyer_email: str, buyer_phone: str | None,
    instructions: list[PaymentInstruction], payee_name: str,
) -> EmailMessage:
    """Order notice to the site owner, with the manual payment details to relay."""
    instruction_items = "\n".join(
        f"    <li><strong>{escape(i.provider)}:</strong> {escape(i.number)}</li>"
        for i in instructions
    )
    html = f"""
<h1>Nouvelle commande de site web</h1>
<p><strong>Site commandé:</strong> {escape(site_title)}</p>
<p><strong>ID du site:</strong> {escape(site_id)}</p>
<h2>Informations de l'acheteur</h2>
<ul>
  <li><strong>Nom:</strong> {escape(buyer_name)}</li>
  <li><strong>Email:</strong> {escape(buyer_email)}</li>
  <li><strong>Téléphone:</strong> {escape(buyer_phone or "-")}</li>
</ul>
<h2>Instructions de paiement à communiquer</h2>
<ul>
{instruction_items}
</ul>
<p><strong>Nom du destinataire:</strong> {escape(payee_name)}</p>
<br/>
<p>Veuillez contacter l'acheteur pour finaliser la transaction.</p>
"""
    return EmailMessage(
        sender=sender,
        to=[owner_email],
        subject=f"Nouvelle commande de site: {site_title}",
        html=html,
        reply_to=buyer_email,
        tags={"kind": "purchase_notification"},
    )

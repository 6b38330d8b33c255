"""Message bodies for outgoing notifications."""

from html import escape

from app.schemas.contact import ContactSubmission

EMAIL_TEMPLATE = """
  <div style="font-family: Arial, sans-serif; color: #333; padding: 20px; background-color: #f4f4f4;">
    <div style="max-width: 600px; margin: auto; background-color: #fff; padding: 20px; border-radius: 8px; box-shadow: 0 2px 5px rgba(0, 0, 0, 0.1);">
      <h2 style="color: #007BFF;">New Message Received</h2>
      <p><strong>Name:</strong> {name}</p>
      <p><strong>Email:</strong> {email}</p>
      <p><strong>Message:</strong></p>
      <blockquote style="border-left: 4px solid #007BFF; padding-left: 10px; margin-left: 0;">
        {message}
      </blockquote>
      <p style="font-size: 12px; color: #888;">Click reply to respond to the sender.</p>
    </div>
  </div>
"""


def compose_message(submission: ContactSubmission) -> str:
    """Plain-text body shared by every channel."""
    return (
        f"New message from {submission.name}\n\n"
        f"Email: {submission.email}\n\n"
        f"Message:\n\n{submission.message}\n\n"
    )


def email_subject(submission: ContactSubmission) -> str:
    return f"New Message From {submission.name}"


def render_email_template(submission: ContactSubmission) -> str:
    """HTML email body. Submitted values are escaped before interpolation."""
    return EMAIL_TEMPLATE.format(
        name=escape(submission.name),
        email=escape(submission.email),
        message=escape(submission.message),
    )

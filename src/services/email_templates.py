"""HTML bodies for transactional emails.

Values that come from users (names, links) are HTML-escaped before they are
placed in a body.
"""

from html import escape
from string import Template

_STYLE = """
  body { font-family: Arial, sans-serif; line-height: 1.6; color: #333;
         max-width: 600px; margin: 0 auto; padding: 20px; background-color: #f4f4f4; }
  .header { background: #02002a; padding: 20px; text-align: center; border-radius: 10px 10px 0 0; }
  .header h1 { color: white; margin: 0; }
  .content { background-color: white; padding: 20px; border-radius: 0 0 10px 10px; }
  .code { text-align: center; margin: 30px 0; font-size: 32px; font-weight: bold;
          letter-spacing: 5px; color: #79096b; }
  .button { display: inline-block; background: #79096b; color: white; padding: 12px 20px;
            text-decoration: none; border-radius: 5px; font-weight: bold; }
  .footer { text-align: center; margin-top: 20px; color: #888; font-size: 0.8em; }
"""

_LAYOUT = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>$title</title>
  <style>$style</style>
</head>
<body>
  <div class="header"><h1>$title</h1></div>
  <div class="content">
$body
  </div>
  <div class="footer"><p>This is an automated message, please do not reply to this email.</p></div>
</body>
</html>
"""
)

_VERIFICATION_BODY = Template(
    """    <p>Hello,</p>
    <p>Thank you for signing up! Your verification code is:</p>
    <div class="code">$code</div>
    <p>Enter this code on the verification page to complete your registration.</p>
    <p>This code will expire in 24 hours for security reasons.</p>
    <p>If you didn't create an account with us, please ignore this email.</p>"""
)

_WELCOME_BODY = Template(
    """    <p>Hello $name,</p>
    <p>Your email address has been verified. Welcome aboard!</p>"""
)

_PASSWORD_RESET_BODY = Template(
    """    <p>Hello,</p>
    <p>We received a request to reset your password. If you didn't make this request,
    please ignore this email.</p>
    <p>To reset your password, click the button below:</p>
    <p style="text-align: center;"><a class="button" href="$reset_url">Reset Password</a></p>
    <p>This link will expire in 1 hour for security reasons.</p>"""
)

_RESET_SUCCESS_BODY = """    <p>Hello,</p>
    <p>We're writing to confirm that your password has been successfully reset.</p>
    <p>If you did not initiate this password reset, please contact our support team immediately.</p>"""


def _render(title: str, body: str) -> str:
    return _LAYOUT.substitute(title=title, style=_STYLE, body=body)


def render_verification_email(code: str) -> str:
    return _render("Verify Your Email", _VERIFICATION_BODY.substitute(code=escape(code)))


def render_welcome_email(name: str) -> str:
    return _render("Welcome", _WELCOME_BODY.substitute(name=escape(name)))


def render_password_reset_email(reset_url: str) -> str:
    body = _PASSWORD_RESET_BODY.substitute(reset_url=escape(reset_url, quote=True))
    return _render("Password Reset", body)


def render_reset_success_email() -> str:
    return _render("Password Reset Successful", _RESET_SUCCESS_BODY)

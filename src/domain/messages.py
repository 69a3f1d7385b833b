"""Verification email content."""

from string import Template

VERIFICATION_SUBJECT = "Account Verification"

_VERIFICATION_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>Verification Code</title>
<style>
body { font-family: Arial, sans-serif; background-color: #f5f5f5; padding: 20px; margin: 0; text-align: center; }
.container { max-width: 600px; margin: auto; background: #ffffff; padding: 30px; border-radius: 12px; }
.header { font-size: 28px; font-weight: bold; margin-bottom: 10px; letter-spacing: 2px; }
.content { padding: 20px; font-size: 18px; color: #333; }
.code-box { background: #e0f7fa; padding: 20px; display: inline-block; font-size: 36px; font-weight: bold; border-radius: 8px; letter-spacing: 8px; }
.footer { margin-top: 20px; font-size: 14px; color: #888; }
</style>
</head>
<body>
<div class="container">
<div class="header">Verify your account</div>
<div class="content">
<p>You're one step away from securing your account.</p>
<p>Enter the following code to verify your account:</p>
<div class="code-box">$code</div>
<p>If you didn't request this, please ignore this email.</p>
</div>
<div class="footer">This code expires soon. Request a new one if it no longer works.</div>
</div>
</body>
</html>
"""
)


def render_verification_email(code: str) -> str:
    """Render the HTML verification email body with ``code`` embedded."""
    return _VERIFICATION_TEMPLATE.substitute(code=code)

"""
Vendor-defined OAuth endpoints and scopes for the providers linked through Nylas.
"""

# Google OAuth2 endpoints
GOOGLE_OAUTH_AUTH_URL = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_OAUTH_ACCESS_TOKEN_URL = "https://www.googleapis.com/oauth2/v4/token"
GOOGLE_SCOPES = " ".join(
    [
        "email",
        "profile",
        "https://mail.google.com/",
        "https://www.googleapis.com/auth/calendar",
        "https://www.googleapis.com/auth/contacts",
    ]
)

# Microsoft identity platform endpoints
MICROSOFT_OAUTH_AUTH_URL = "https://login.microsoftonline.com/common/oauth2/v2.0/authorize"
MICROSOFT_OAUTH_ACCESS_TOKEN_URL = "https://login.microsoftonline.com/common/oauth2/v2.0/token"
MICROSOFT_SCOPES = " ".join(
    [
        "openid",
        "offline_access",
        "https://outlook.office.com/EAS.AccessAsUser.All",
        "https://outlook.office.com/EWS.AccessAsUser.All",
    ]
)

FORM_URLENCODED = "application/x-www-form-urlencoded"

OAUTH_CALLBACK_PATH = "/nylas/oauth2/callback"

WEBHOOK_SIGNATURE_HEADER = "x-nylas-signature"

# Grant identifier that resolves to the grant owning the access token.
NYLAS_CURRENT_GRANT = "me"

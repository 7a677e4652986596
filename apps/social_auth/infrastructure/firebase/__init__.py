"""Firebase (BaaS) adapters."""

from apps.social_auth.infrastructure.firebase.auth_client import FirebaseAuthClient
from apps.social_auth.infrastructure.firebase.functions_client import FirebaseFunctionsClient

__all__ = ["FirebaseAuthClient", "FirebaseFunctionsClient"]

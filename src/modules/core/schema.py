"""drf-spectacular extensions.

Imported from ``CoreConfig.ready()`` so the extension registers before
the schema is generated.
"""

from drf_spectacular.extensions import OpenApiAuthenticationExtension


class SellerJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "modules.core.authentication.SellerJWTAuthentication"
    name = "BearerAuth"

    def get_security_definition(self, auto_schema):
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }

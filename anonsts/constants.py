"""Well-known identifiers shared by the anonymous token codec and validators."""

BST_NAMESPACE = "urn:org:codice:security:sso"

ANONYMOUS_TOKEN_VALUE_TYPE = f"{BST_NAMESPACE}#AnonymousToken"
ANONYMOUS_CREDENTIALS = "Anonymous"

BASE64_ENCODING_TYPE = (
    "http://docs.oasis-open.org/wss/2004/01/"
    "oasis-200401-wss-soap-message-security-1.0#Base64Binary"
)

ANONYMOUS_NAME_PREFIX = "Anonymous"
ANONYMOUS_NAME_DELIMITER = "@"

WILDCARD_REALM = "*"
DEFAULT_SUPPORTED_REALMS = ("DDF", "karaf")

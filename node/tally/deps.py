from fastapi import Header


def caller_identity(x_identity: str = Header(..., alias="X-Identity")) -> str:
    """
    Identity of the caller, authenticated upstream before it reaches us.
    """
    return x_identity.strip()

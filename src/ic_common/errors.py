"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Identity (principal, subaccount, account identifier)
  2xxx: Ledger (remote query / metadata)
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Identity ---

class InvalidIdentityError(AppError):
    def __init__(self, detail: str, code: int = 1001) -> None:
        super().__init__(code, f"Invalid identity: {detail}", 422)


class InvalidSubaccountError(InvalidIdentityError):
    def __init__(self, length: int) -> None:
        super().__init__(f"subaccount must be 32 bytes, got {length}", code=1002)


class InvalidAccountIdentifierError(InvalidIdentityError):
    def __init__(self, account_id: str, reason: str) -> None:
        super().__init__(f"account identifier {account_id!r}: {reason}", code=1003)


# --- 2xxx: Ledger ---

class RemoteQueryError(AppError):
    def __init__(self, token_id: str, reason: str) -> None:
        self.token_id = token_id
        self.reason = reason
        super().__init__(2001, f"Failed to query {token_id} balance: {reason}", 502)


class RemoteMetadataError(AppError):
    def __init__(self, token_id: str, reason: str) -> None:
        self.token_id = token_id
        self.reason = reason
        super().__init__(2002, f"Failed to fetch {token_id} token info: {reason}", 502)


# --- 9xxx: System ---

class InvalidNetworkConfigurationError(AppError):
    def __init__(self, network: str) -> None:
        super().__init__(
            9001,
            f'Invalid DFX_NETWORK value: {network!r}, expected "local" or "ic"',
            500,
        )


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)

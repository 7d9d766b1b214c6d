from fastapi import Request

from gamelearn.database import MongoStore

# ==================== DEPENDENCY FUNCTIONS ====================

async def get_store(request: Request) -> MongoStore:
    """
    Store dependency.
    Connects on first use when startup did not (serverless cold start);
    raises StoreUnavailable if the database cannot be reached.
    """
    store = request.app.state.store
    if not store.is_ready():
        await store.connect()
    return store

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..logger import get_logger
from ..schemas import TransactionCreate, TransactionUpdate, TransactionResponse
from ..services import TransactionStore
from .deps import current_user_id

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_model=list[TransactionResponse])
def list_transactions(
    user_id: str = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    """Get the user's transactions, newest first."""
    return TransactionStore(db).list_for_user(user_id)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    user_id: str = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    """Get a single transaction by ID."""
    transaction = TransactionStore(db).get(user_id, transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    user_id: str = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    """Create a new transaction."""
    try:
        return TransactionStore(db).create(user_id, transaction)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create transaction for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create transaction")


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    transaction: TransactionUpdate,
    user_id: str = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    """Update a transaction."""
    store = TransactionStore(db)
    db_transaction = store.get(user_id, transaction_id)
    if not db_transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    try:
        return store.update(db_transaction, transaction)
    except SQLAlchemyError as e:
        logger.error(f"Failed to update transaction #{transaction_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update transaction")


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    user_id: str = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a transaction."""
    store = TransactionStore(db)
    db_transaction = store.get(user_id, transaction_id)
    if not db_transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    try:
        store.delete(db_transaction)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete transaction #{transaction_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete transaction")
    return None

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.transactions import (
    AdminMessageUpdate,
    CheckoutCreate,
    DeleteResult,
    QuotationCreate,
    TowingCreate,
    TransactionCreated,
    TransactionOut,
    TransactionStatus,
    TransactionType,
    TransactionUpdate,
    TransactionWithDetailOut,
)
from app.services import transactions_service

router = APIRouter()


@router.post("/checkout", response_model=TransactionCreated, status_code=status.HTTP_201_CREATED)
def checkout(payload: CheckoutCreate, db: Session = Depends(get_db)):
    """Turn a cart into a Shop transaction with a frozen order."""
    txn = transactions_service.checkout(db, payload)
    return {"success": True, "transaction": txn}


@router.post("/towing", response_model=TransactionCreated, status_code=status.HTTP_201_CREATED)
def create_towing(payload: TowingCreate, db: Session = Depends(get_db)):
    txn = transactions_service.create_towing_request(db, payload)
    return {"success": True, "transaction": txn}


@router.post("/quotation", response_model=TransactionCreated, status_code=status.HTTP_201_CREATED)
def create_quotation(payload: QuotationCreate, db: Session = Depends(get_db)):
    txn = transactions_service.create_quotation(db, payload)
    return {"success": True, "transaction": txn}


@router.get("", response_model=List[TransactionOut])
def list_transactions(
    type: Optional[TransactionType] = None,
    status: Optional[TransactionStatus] = None,
    user_id: Optional[int] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    """Newest first."""
    return transactions_service.list_transactions(db, type=type, status=status, user_id=user_id)


@router.get("/{txn_id}", response_model=TransactionWithDetailOut)
def get_transaction(txn_id: str, db: Session = Depends(get_db)):
    return transactions_service.get_transaction(db, txn_id)


@router.put("/{txn_id}", response_model=TransactionOut)
def update_transaction(txn_id: str, payload: TransactionUpdate, db: Session = Depends(get_db)):
    """Partial update: only the fields present in the body change."""
    return transactions_service.update_transaction(db, txn_id, payload)


@router.put("/{txn_id}/admin-message", response_model=TransactionWithDetailOut)
def set_admin_message(txn_id: str, payload: AdminMessageUpdate, db: Session = Depends(get_db)):
    return transactions_service.set_admin_message(db, txn_id, payload.admin_message)


@router.delete("/{txn_id}", response_model=DeleteResult)
def delete_transaction(txn_id: str, db: Session = Depends(get_db)):
    transactions_service.delete_transaction(db, txn_id)
    return {"success": True, "message": f"Transaction {txn_id} deleted"}

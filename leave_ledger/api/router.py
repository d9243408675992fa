from fastapi import APIRouter

from leave_ledger.api.balances import balances_router, entries_router
from leave_ledger.api.pay_periods import pay_periods_router

api_router = APIRouter()
api_router.include_router(balances_router)
api_router.include_router(entries_router)
api_router.include_router(pay_periods_router)

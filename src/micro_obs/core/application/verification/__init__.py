from micro_obs.core.application.verification.stock_verification import verify_stock

__all__ = ["verify_stock"]

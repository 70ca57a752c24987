"""Receipt points service: scores purchase receipts and keeps the results in memory."""

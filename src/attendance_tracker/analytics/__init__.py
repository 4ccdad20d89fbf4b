"""Pure aggregation and filtering over already-fetched attendance records."""

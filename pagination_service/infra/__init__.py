"""Infrastructure adapters: DynamoDB store and logging."""

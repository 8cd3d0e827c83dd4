"""FastAPI application: factory, lifespan, middleware, routing and error handling."""

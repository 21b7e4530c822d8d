# FoodBazar test suite
#
# - test_store_service: store contract, commit side effects, persistence
# - test_storage_service: key-value adapters
# - test_validation: payload validation and sale building
# - test_query_service / test_reporting_service: pure helpers over seed data
# - test_api / test_cli: Flask surface
#
# Run with: python -m pytest

from pagination_service.main import main

main()

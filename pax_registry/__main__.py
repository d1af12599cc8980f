from pax_registry.main import main

main()

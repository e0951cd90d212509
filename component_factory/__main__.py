from component_factory.cli import main

main()

from yr.cli.app import main

main()

from nextrelease.cli.app import main

main()

from tagspec.cli import main

main()

from urltally.cli import main

main()

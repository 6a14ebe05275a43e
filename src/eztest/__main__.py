from eztest.cli import main

main()

from chembalance.cli import main

main()

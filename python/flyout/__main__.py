from flyout._cli import main

main()

from .weather import main

main()

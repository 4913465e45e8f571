from snakearena.main import main

main()

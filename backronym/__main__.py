from backronym.app.app import main

main()

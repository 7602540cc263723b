from nestorbot.app import main

main()

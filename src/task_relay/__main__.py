from task_relay.app import main

main()

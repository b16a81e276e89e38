"""Vi edit mode: command and motion parsing, keybindings and the mode itself."""
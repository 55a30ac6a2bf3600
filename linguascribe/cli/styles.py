"""
CSS styles for LinguaScribe CLI components
"""

SETUP_SCREEN_CSS = """
SetupScreen {
    align: center middle;
}

#setup-container {
    width: 80;
    height: auto;
    padding: 2;
    border: solid $primary;
}

#provider-select {
    margin: 0 0 1 0;
}

#api-input {
    margin: 1 0;
}

#button-container {
    align: center middle;
    margin-top: 1;
    height: auto;
}
"""

MAIN_APP_CSS = """
#page {
    height: 1fr;
    padding: 1 2;
}

.card {
    height: auto;
    border: round $primary;
    padding: 0 1 1 1;
    margin: 0 0 1 0;
}

.card-title {
    text-style: bold;
    color: $primary;
    margin: 1 0 0 0;
}

.card-description {
    color: $text-muted;
    margin: 0 0 1 0;
}

#file-row {
    height: auto;
}

#file-input {
    width: 1fr;
}

#transcribe-btn {
    margin-left: 1;
}

#selected-file {
    color: $text-muted;
    height: auto;
}

#progress-container {
    height: auto;
    display: none;
    margin-top: 1;
}

#progress-status {
    color: $text-muted;
}

#input-text {
    height: 12;
}

#action-row {
    height: auto;
    align: right middle;
    margin-top: 1;
}

#action-row Button {
    margin-left: 1;
}

#thinking {
    height: auto;
    display: none;
    border: dashed $primary 50%;
    padding: 1;
    align: center middle;
    margin: 0 0 1 0;
}

#thinking Label {
    width: 100%;
    content-align: center middle;
    color: $text-muted;
}

#thinking LoadingIndicator {
    height: 3;
}

#status-bar {
    height: 1;
    color: $text-muted;
    padding: 0 1;
}
"""

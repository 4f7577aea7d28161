"""
服務層

這個 package 包含純計算邏輯，不負責狀態轉換：
- ClockService：HH:MM 解析與格式化
- FormatService：輸出行格式
- BillingService：計費邏輯
- ParsingService：輸入解析
"""

"""
核心業務邏輯層

這個 package 包含一次營業日重播的所有狀態與狀態轉換：
- EventProcessor：事件狀態機
- ClubState：桌位池、客戶登記簿、等待隊列、使用帳本
- Finalizer：打烊結算
- ClubManager：session 入口
"""
